# =============================================================================
# lib/ - Standalone Adapter Modules
# =============================================================================
# This package contains implementations of the core data access ports:
# - memory_store.py: Thread-safe in-memory tables for users, POS and reviews
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.memory_store import (
    InMemoryCrudDataService,
    InMemoryPosDataService,
    InMemoryReviewDataService,
    InMemoryUserDataService,
)

__all__ = [
    "InMemoryCrudDataService",
    "InMemoryPosDataService",
    "InMemoryReviewDataService",
    "InMemoryUserDataService",
]
