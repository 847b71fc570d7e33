# =============================================================================
# core/services/pos_service.py - Point of Sale Business Logic
# =============================================================================

import logging

from core.models import Pos
from core.ports.data import PosDataService
from core.services.crud_service import CrudService

logger = logging.getLogger(__name__)


class PosService(CrudService[Pos, int]):
    """Service for point of sale management operations."""

    def __init__(self, pos_data_service: PosDataService):
        super().__init__(Pos, pos_data_service)
        self.pos_data_service = pos_data_service

    def get_by_name(self, name: str) -> Pos:
        """
        Get a POS by its unique name.

        Raises:
            NotFoundError: If no POS has this name
        """
        logger.debug(f"Fetching Pos with name {name}")
        return self.pos_data_service.get_by_name(name)
