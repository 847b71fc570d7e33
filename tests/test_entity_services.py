# =============================================================================
# tests/test_entity_services.py - User and POS Service Tests
# =============================================================================
# Unit tests for the simple entity services built on CrudService.
# =============================================================================

import pytest

from app.exceptions import NotFoundError
from core.models import Pos, User
from core.services import PosService, UserService


class TestUserService:
    """Tests for UserService."""

    def test_get_by_login_name(self, user_data_service, users):
        user_data_service.get_by_login_name.return_value = users[0]
        service = UserService(user_data_service)

        result = service.get_by_login_name("jane_doe")

        assert result is users[0]
        user_data_service.get_by_login_name.assert_called_once_with("jane_doe")

    def test_get_by_login_name_propagates_not_found(self, user_data_service):
        user_data_service.get_by_login_name.side_effect = NotFoundError(User, "ghost")
        service = UserService(user_data_service)

        with pytest.raises(NotFoundError):
            service.get_by_login_name("ghost")

    def test_update_checks_existence(self, user_data_service, users):
        """Inherited upsert validates existence for users with ID."""
        renamed = users[0].model_copy(update={"first_name": "Janet"})
        user_data_service.get_by_id.return_value = users[0]
        user_data_service.upsert.return_value = renamed
        service = UserService(user_data_service)

        assert service.upsert(renamed) is renamed
        user_data_service.get_by_id.assert_called_once_with(users[0].id)


class TestPosService:
    """Tests for PosService."""

    def test_get_by_name(self, pos_data_service, pos_list):
        pos_data_service.get_by_name.return_value = pos_list[0]
        service = PosService(pos_data_service)

        assert service.get_by_name("Schmelzpunkt") is pos_list[0]
        pos_data_service.get_by_name.assert_called_once_with("Schmelzpunkt")

    def test_create_skips_existence_check(self, pos_data_service, pos_list):
        new_pos = pos_list[0].model_copy(update={"id": None})
        pos_data_service.upsert.return_value = pos_list[0]
        service = PosService(pos_data_service)

        assert service.upsert(new_pos) is pos_list[0]
        pos_data_service.get_by_id.assert_not_called()

    def test_entity_type_is_pos(self, pos_data_service):
        assert PosService(pos_data_service).entity_type is Pos
