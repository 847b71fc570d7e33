# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the framework-agnostic review domain:
# - models/: Immutable pydantic entities (User, Pos, Review)
# - ports/: Data access interfaces the services depend on
# - services/: Generic CRUD service and the review workflow
#
# Code in this package must not depend on a storage engine.
# Adapters implementing the ports live in lib/.
# =============================================================================
