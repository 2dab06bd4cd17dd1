from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from config import ApplicationConfig
from mall_access.domain.entities import AdminPermission, AdminRole, AdminUser


def _returns_argument(entity, *args, **kwargs):
    return entity


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; lookups find nothing by default"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = AsyncMock()
    uow.users.get_by_id.return_value = None
    uow.users.get_by_email.return_value = None
    uow.users.get_by_ids.return_value = []
    uow.users.list_paginated.return_value = ([], 0)
    uow.users.list_all_by_name.return_value = []
    uow.users.create.side_effect = _returns_argument
    uow.users.update.side_effect = _returns_argument

    uow.roles = AsyncMock()
    uow.roles.get_by_id.return_value = None
    uow.roles.get_by_name.return_value = None
    uow.roles.get_by_ids.return_value = []
    uow.roles.get_for_user.return_value = []
    uow.roles.list_all.return_value = []
    uow.roles.get_max_sort_order.return_value = 0
    uow.roles.create.side_effect = _returns_argument
    uow.roles.update.side_effect = _returns_argument

    uow.permissions = AsyncMock()
    uow.permissions.get_by_id.return_value = None
    uow.permissions.get_by_ids.return_value = []
    uow.permissions.get_active_by_pair.return_value = None
    uow.permissions.get_for_roles.return_value = []
    uow.permissions.list_all.return_value = []
    uow.permissions.create.side_effect = _returns_argument
    uow.permissions.update.side_effect = _returns_argument

    uow.user_roles = AsyncMock()
    uow.user_roles.get_role_ids_for_user.return_value = []
    uow.user_roles.get_role_ids_for_users.return_value = {}
    uow.user_roles.get_user_ids_for_role.return_value = []

    uow.role_permissions = AsyncMock()
    uow.role_permissions.get_permission_ids_for_role.return_value = []

    uow.activity_logs = AsyncMock()
    uow.activity_logs.create.side_effect = _returns_argument
    uow.activity_logs.get_by_id.return_value = None
    uow.activity_logs.list_paginated.return_value = ([], 0)
    uow.activity_logs.list_recent.return_value = []
    uow.activity_logs.count_by_module.return_value = []
    uow.activity_logs.count_by_day_since.return_value = []
    return uow


@pytest.fixture
def grant(mock_uow):
    """Give the acting user one role holding exactly the given (module, action) pairs"""

    def _grant(*pairs):
        role = AdminRole(id=uuid4(), name="tester", display_name="Tester", color="#6b7280")
        mock_uow.roles.get_for_user.return_value = [role]
        mock_uow.permissions.get_for_roles.return_value = [
            AdminPermission(
                name=f"{module}.{action}",
                module=module,
                action=action,
                display_name=f"{action} {module}",
            )
            for module, action in pairs
        ]
        return role

    return _grant


@pytest.fixture
def make_user():
    def _make_user(**overrides):
        fields = {
            "id": uuid4(),
            "email": "jane@mall.example.com",
            "full_name": "Jane Doe",
            "password_hash": "$2b$04$invalidinvalidinvalidinvalidinvalidinvalidinvalidinva",
        }
        fields.update(overrides)
        return AdminUser(**fields)

    return _make_user
