# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================

import logging

from core.models import User
from core.ports.data import UserDataService
from core.services.crud_service import CrudService

logger = logging.getLogger(__name__)


class UserService(CrudService[User, int]):
    """Service for user management operations."""

    def __init__(self, user_data_service: UserDataService):
        super().__init__(User, user_data_service)
        self.user_data_service = user_data_service

    def get_by_login_name(self, login_name: str) -> User:
        """
        Get a user by login name.

        Raises:
            NotFoundError: If no user has this login name
        """
        logger.debug(f"Fetching User with login name {login_name}")
        return self.user_data_service.get_by_login_name(login_name)
