# =============================================================================
# core/models/base.py - Domain Model Base
# =============================================================================
# Every domain entity is an immutable value with an optional identity.
#
# Identity contract:
# - id is None   -> entity has not been persisted yet (upsert creates it)
# - id is set    -> entity exists in storage (upsert replaces it)
#
# Entities are never mutated in place. Use model_copy(update={...}) to build
# an amended copy, then persist that copy through a service.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """
    Base class for all persisted domain entities.

    Timestamps are assigned by the persistence layer, never by services.
    """

    model_config = ConfigDict(frozen=True)

    # Assigned by storage on first save
    id: int | None = Field(
        default=None,
        description="Storage identity (None until first persisted)"
    )

    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the entity was first persisted"
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Timestamp of the last write"
    )

    @property
    def is_new(self) -> bool:
        """True if the entity has no identity yet."""
        return self.id is None
