# =============================================================================
# core/models/review.py - Review Entity
# =============================================================================
# One user's review of one point of sale.
#
# Approval flow:
#   Unapproved (approval_count=0) --approve()--> ... --approve()--> Approved
#
# `approved` is a stored projection. It only changes when the review service
# recomputes it (approval_count >= min_count) and persists the result.
# Approved is terminal: there is no unapprove.
# =============================================================================

from pydantic import Field

from .base import DomainModel
from .pos import Pos
from .user import User


class Review(DomainModel):
    """
    A review written by an author for a point of sale.

    At most one review may exist per (author, pos) pair.
    """

    pos: Pos = Field(
        ...,
        description="The reviewed point of sale"
    )

    author: User = Field(
        ...,
        description="The user who wrote the review"
    )

    # Review text
    review: str = Field(
        ...,
        min_length=1,
        description="Free-form review content"
    )

    approval_count: int = Field(
        default=0,
        ge=0,
        description="Number of approvals by users other than the author"
    )

    approved: bool = Field(
        default=False,
        description="True once approval_count reached the configured quorum"
    )
