# =============================================================================
# core/ports/ - Data Access Ports
# =============================================================================
# Abstract interfaces the services use to reach storage.
# Implementations live outside core/ (see lib/memory_store.py).
# =============================================================================

from .data import (
    CrudDataService,
    PosDataService,
    ReviewDataService,
    UserDataService,
)

__all__ = [
    "CrudDataService",
    "PosDataService",
    "ReviewDataService",
    "UserDataService",
]
