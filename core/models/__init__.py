# =============================================================================
# core/models/ - Domain Models
# =============================================================================
# This package contains the immutable domain entities:
# - base.py: DomainModel (optional identity + timestamps)
# - user.py: User
# - pos.py: Pos (point of sale), PosType, CampusType
# - review.py: Review (approval count + approved flag)
# - approval.py: ApprovalConfiguration (quorum threshold)
# =============================================================================

from .base import DomainModel
from .user import User
from .pos import CampusType, Pos, PosType
from .review import Review
from .approval import ApprovalConfiguration

__all__ = [
    "DomainModel",
    "User",
    "CampusType",
    "Pos",
    "PosType",
    "Review",
    "ApprovalConfiguration",
]
