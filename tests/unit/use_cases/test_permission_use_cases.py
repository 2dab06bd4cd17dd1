from uuid import uuid4

import pytest

from mall_access.app.use_cases.permissions import (
    CreatePermissionUseCase,
    ListPermissionsUseCase,
    SetPermissionStatusUseCase,
)
from mall_access.domain.entities import AdminPermission


def _permission(module="events", action="view", is_active=True):
    return AdminPermission(
        id=uuid4(),
        name=f"{module}.{action}",
        module=module,
        action=action,
        display_name="View Events",
        is_active=is_active,
    )


@pytest.mark.asyncio
async def test_list_permissions(mock_uow, grant):
    grant(("admin_roles", "view"))
    mock_uow.permissions.list_all.return_value = [_permission()]

    result = await ListPermissionsUseCase(mock_uow).execute(uuid4(), include_inactive=True)

    assert result.is_ok()
    assert [p.name for p in result.value] == ["events.view"]
    mock_uow.permissions.list_all.assert_called_once_with(include_inactive=True)


@pytest.mark.asyncio
async def test_create_permission_defaults_display_name(mock_uow, grant):
    # Arrange
    grant(("admin_roles", "manage"))

    # Act
    result = await CreatePermissionUseCase(mock_uow).execute(uuid4(), "events", "export")

    # Assert
    assert result.is_ok()
    assert result.value.name == "events.export"
    assert result.value.display_name == "Export Events"
    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert entry.resource_type == "admin_permission"


@pytest.mark.asyncio
async def test_create_permission_duplicate_active_pair(mock_uow, grant):
    grant(("admin_roles", "manage"))
    mock_uow.permissions.get_active_by_pair.return_value = _permission()

    result = await CreatePermissionUseCase(mock_uow).execute(uuid4(), "events", "view")

    assert result.is_err()
    assert result.error.code == "PERMISSION_EXISTS"


@pytest.mark.asyncio
async def test_create_permission_rejects_malformed_key(mock_uow, grant):
    grant(("admin_roles", "manage"))

    result = await CreatePermissionUseCase(mock_uow).execute(uuid4(), "Events", "view")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_deactivate_permission(mock_uow, grant):
    # Arrange
    grant(("admin_roles", "manage"))
    permission = _permission()
    mock_uow.permissions.get_by_id.return_value = permission

    # Act
    result = await SetPermissionStatusUseCase(mock_uow).execute(
        uuid4(), permission.id, False
    )

    # Assert
    assert result.is_ok()
    assert result.value.is_active is False
    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert entry.action == "toggle"


@pytest.mark.asyncio
async def test_reactivate_permission_blocked_by_active_twin(mock_uow, grant):
    # Arrange
    grant(("admin_roles", "manage"))
    retired = _permission(is_active=False)
    mock_uow.permissions.get_by_id.return_value = retired
    mock_uow.permissions.get_active_by_pair.return_value = _permission()

    # Act
    result = await SetPermissionStatusUseCase(mock_uow).execute(uuid4(), retired.id, True)

    # Assert
    assert result.is_err()
    assert result.error.code == "PERMISSION_EXISTS"
    mock_uow.permissions.update.assert_not_called()


@pytest.mark.asyncio
async def test_set_status_unknown_permission(mock_uow, grant):
    grant(("admin_roles", "manage"))

    result = await SetPermissionStatusUseCase(mock_uow).execute(uuid4(), uuid4(), False)

    assert result.is_err()
    assert result.error.code == "PERMISSION_NOT_FOUND"
