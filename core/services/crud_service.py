# =============================================================================
# core/services/crud_service.py - Generic CRUD Business Logic
# =============================================================================
# Shared create/read/update/delete orchestration for every domain entity.
# Storage is delegated to a CrudDataService port.
#
# Create vs. update is decided by the entity's identity:
# - id is None -> create, no existence check
# - id is set  -> update, the entity must already exist (NotFoundError otherwise)
# =============================================================================

import logging
from typing import Generic, TypeVar

from core.models import DomainModel
from core.ports.data import CrudDataService

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DomainModel)
ID = TypeVar("ID")


class CrudService(Generic[T, ID]):
    """
    Service for generic entity CRUD operations.

    Subclasses pass their entity type and data port, and may override
    upsert() to add validation before calling super().upsert().
    """

    def __init__(self, entity_type: type[T], data_service: CrudDataService[T, ID]):
        self.entity_type = entity_type
        self.data_service = data_service

    def get_all(self) -> list[T]:
        """Return every stored entity, as returned by the port."""
        logger.debug(f"Fetching all {self.entity_type.__name__} entities")
        return self.data_service.get_all()

    def get_by_id(self, entity_id: ID) -> T:
        """
        Get an entity by ID.

        Raises:
            NotFoundError: If the entity doesn't exist
        """
        logger.debug(f"Fetching {self.entity_type.__name__} with ID {entity_id}")
        return self.data_service.get_by_id(entity_id)

    def upsert(self, entity: T) -> T:
        """
        Create or update an entity.

        Args:
            entity: Entity without ID (create) or with ID (update)

        Returns:
            The persisted entity

        Raises:
            NotFoundError: If an entity with the given ID doesn't exist
            DuplicationError: If the port rejects the write as a duplicate
        """
        name = self.entity_type.__name__

        if entity.id is None:
            logger.debug(f"Creating new {name}")
        else:
            # Never create an entity from a caller-supplied ID
            logger.debug(f"Updating {name} with ID {entity.id}")
            self.get_by_id(entity.id)

        saved = self.data_service.upsert(entity)
        logger.info(f"Saved {name} with ID {saved.id}")
        return saved

    def delete(self, entity_id: ID) -> None:
        """
        Delete an entity by ID.

        Raises:
            NotFoundError: If the entity doesn't exist
        """
        self.data_service.delete(entity_id)
        logger.info(f"Deleted {self.entity_type.__name__} with ID {entity_id}")

    def clear(self) -> None:
        """Remove all entities (test/reset use only)."""
        self.data_service.clear()
        logger.info(f"Cleared all {self.entity_type.__name__} entities")
