# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .crud_service import CrudService
from .user_service import UserService
from .pos_service import PosService
from .review_service import ReviewService

__all__ = [
    "CrudService",
    "UserService",
    "PosService",
    "ReviewService",
]
