# =============================================================================
# lib/memory_store.py - In-Memory Data Access Adapters
# =============================================================================
# Dict-backed implementations of the data access ports in core/ports/.
# Used by the composition root in app/main.py and by tests.
#
# Behaves like a relational table:
# - IDs come from a per-store sequence starting at 1
# - created_at is set on insert, updated_at on every write (UTC)
# - declared unique keys are enforced on every upsert
# - every public call holds the store lock, so writes are serialized
#
# Usage:
#   from lib.memory_store import InMemoryReviewDataService
#   reviews = InMemoryReviewDataService()
#   saved = reviews.upsert(Review(pos=pos, author=user, review="Nice"))
# =============================================================================

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Generic, TypeVar

from app.exceptions import DuplicationError, NotFoundError
from core.models import DomainModel, Pos, Review, User
from core.ports.data import (
    CrudDataService,
    PosDataService,
    ReviewDataService,
    UserDataService,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DomainModel)

# (field label, key extractor) pairs checked on upsert
UniqueKey = tuple[str, Callable[[Any], Any]]


class InMemoryCrudDataService(CrudDataService[T, int], Generic[T]):
    """
    Thread-safe in-memory store for one entity type.

    Subclasses declare `entity_type` and `unique_keys`.
    """

    entity_type: type[T]
    unique_keys: list[UniqueKey] = []

    def __init__(self):
        self._entities: dict[int, T] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # CrudDataService
    # -------------------------------------------------------------------------

    def get_all(self) -> list[T]:
        with self._lock:
            return [self._entities[key] for key in sorted(self._entities)]

    def get_by_id(self, entity_id: int) -> T:
        with self._lock:
            entity = self._entities.get(entity_id) if entity_id is not None else None
            if entity is None:
                raise NotFoundError(self.entity_type, entity_id)
            return entity

    def upsert(self, entity: T) -> T:
        now = datetime.now(timezone.utc)

        with self._lock:
            if entity.id is None:
                entity_id = next(self._sequence)
                created_at = now
            else:
                # Replace only; never insert with a caller-chosen ID
                entity_id = entity.id
                created_at = self.get_by_id(entity_id).created_at

            self._check_unique(entity, entity_id)

            saved = entity.model_copy(update={
                "id": entity_id,
                "created_at": created_at,
                "updated_at": now,
            })
            self._entities[entity_id] = saved

        logger.debug(f"Stored {self.entity_type.__name__} {entity_id}")
        return saved

    def delete(self, entity_id: int) -> None:
        with self._lock:
            if entity_id not in self._entities:
                raise NotFoundError(self.entity_type, entity_id)
            del self._entities[entity_id]

    def clear(self) -> None:
        with self._lock:
            self._entities.clear()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _find(self, predicate: Callable[[T], bool]) -> list[T]:
        with self._lock:
            return [entity for entity in self.get_all() if predicate(entity)]

    def _find_one(self, predicate: Callable[[T], bool], lookup: Any) -> T:
        matches = self._find(predicate)
        if not matches:
            raise NotFoundError(self.entity_type, lookup)
        return matches[0]

    def _check_unique(self, entity: T, entity_id: int) -> None:
        """Raise DuplicationError if another stored entity shares a unique key."""
        for field, key in self.unique_keys:
            value = key(entity)
            for other_id, other in self._entities.items():
                if other_id != entity_id and key(other) == value:
                    logger.warning(
                        f"Duplicate {self.entity_type.__name__} {field}: {value}"
                    )
                    raise DuplicationError(self.entity_type, field, value)


class InMemoryUserDataService(InMemoryCrudDataService[User], UserDataService):
    """In-memory user table (unique login name and email address)."""

    entity_type = User
    unique_keys = [
        ("login_name", lambda user: user.login_name),
        ("email_address", lambda user: user.email_address),
    ]

    def get_by_login_name(self, login_name: str) -> User:
        return self._find_one(lambda user: user.login_name == login_name, login_name)


class InMemoryPosDataService(InMemoryCrudDataService[Pos], PosDataService):
    """In-memory POS table (unique name)."""

    entity_type = Pos
    unique_keys = [
        ("name", lambda pos: pos.name),
    ]

    def get_by_name(self, name: str) -> Pos:
        return self._find_one(lambda pos: pos.name == name, name)


class InMemoryReviewDataService(InMemoryCrudDataService[Review], ReviewDataService):
    """In-memory review table (unique per POS and author)."""

    entity_type = Review
    unique_keys = [
        ("pos_id, author_id", lambda review: (review.pos.id, review.author.id)),
    ]

    def filter_by_approval(self, pos: Pos, approved: bool) -> list[Review]:
        return self._find(
            lambda review: review.pos.id == pos.id and review.approved == approved
        )

    def filter_by_author(self, pos: Pos, author: User) -> list[Review]:
        return self._find(
            lambda review: review.pos.id == pos.id and review.author.id == author.id
        )
