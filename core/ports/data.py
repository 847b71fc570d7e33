# =============================================================================
# core/ports/data.py - Data Access Port Interfaces
# =============================================================================
# One port per entity type. Services depend on these interfaces only; the
# storage engine behind them is opaque.
#
# Contract shared by every implementation:
# - get_by_id / delete raise NotFoundError if the identity is unknown
# - upsert inserts when entity.id is None, replaces otherwise, and returns the
#   persisted value (id and timestamps assigned)
# - upsert raises DuplicationError when a uniqueness constraint is violated
# - writes to the same identity are serialized; the approval workflow's
#   read-increment-write relies on this to avoid lost updates
# =============================================================================

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from core.models import DomainModel, Pos, Review, User

T = TypeVar("T", bound=DomainModel)
ID = TypeVar("ID")


class CrudDataService(ABC, Generic[T, ID]):
    """Interface for basic entity persistence."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return all stored entities."""

    @abstractmethod
    def get_by_id(self, entity_id: ID) -> T:
        """Return the entity or raise NotFoundError."""

    @abstractmethod
    def upsert(self, entity: T) -> T:
        """Insert (no id) or replace (id set) the entity and return the stored value."""

    @abstractmethod
    def delete(self, entity_id: ID) -> None:
        """Delete the entity or raise NotFoundError."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entities."""


class UserDataService(CrudDataService[User, int]):
    """Interface for user persistence."""

    @abstractmethod
    def get_by_login_name(self, login_name: str) -> User:
        """Return the user with this login name or raise NotFoundError."""


class PosDataService(CrudDataService[Pos, int]):
    """Interface for point of sale persistence."""

    @abstractmethod
    def get_by_name(self, name: str) -> Pos:
        """Return the POS with this name or raise NotFoundError."""


class ReviewDataService(CrudDataService[Review, int]):
    """Interface for review persistence."""

    @abstractmethod
    def filter_by_approval(self, pos: Pos, approved: bool) -> list[Review]:
        """Return the reviews of a POS with the given approval flag."""

    @abstractmethod
    def filter_by_author(self, pos: Pos, author: User) -> list[Review]:
        """Return the reviews of a POS written by the given author."""
