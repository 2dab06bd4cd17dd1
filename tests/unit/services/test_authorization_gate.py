from uuid import uuid4

import pytest

from mall_access.app.services.authorization import AuthorizationGate
from mall_access.domain.entities import AdminPermission, AdminRole


def _permission(module, action, is_active=True):
    return AdminPermission(
        name=f"{module}.{action}",
        module=module,
        action=action,
        display_name=f"{action} {module}",
        is_active=is_active,
    )


@pytest.mark.asyncio
async def test_viewer_role_grants_exact_pairs_only(mock_uow):
    """Viewer holding events:view and tenants:view can view events but not edit them"""
    # Arrange
    user_id = uuid4()
    viewer = AdminRole(id=uuid4(), name="viewer", display_name="Viewer")
    mock_uow.roles.get_for_user.return_value = [viewer]
    mock_uow.permissions.get_for_roles.return_value = [
        _permission("events", "view"),
        _permission("tenants", "view"),
    ]
    gate = AuthorizationGate(mock_uow)

    # Act / Assert
    assert await gate.check_permission(user_id, "events", "view") is True
    assert await gate.check_permission(user_id, "events", "edit") is False
    mock_uow.permissions.get_for_roles.assert_called_with([viewer.id])


@pytest.mark.asyncio
async def test_user_without_roles_is_denied(mock_uow):
    """After every role is removed, nothing is allowed"""
    # Arrange
    mock_uow.roles.get_for_user.return_value = []
    gate = AuthorizationGate(mock_uow)

    # Act
    allowed = await gate.check_permission(uuid4(), "events", "view")

    # Assert
    assert allowed is False
    mock_uow.permissions.get_for_roles.assert_not_called()


@pytest.mark.asyncio
async def test_inactive_permission_grants_nothing(mock_uow):
    # Arrange
    mock_uow.roles.get_for_user.return_value = [
        AdminRole(id=uuid4(), name="editor", display_name="Editor")
    ]
    mock_uow.permissions.get_for_roles.return_value = [
        _permission("events", "edit", is_active=False)
    ]
    gate = AuthorizationGate(mock_uow)

    # Act / Assert
    assert await gate.check_permission(uuid4(), "events", "edit") is False


@pytest.mark.asyncio
async def test_union_across_roles(mock_uow):
    # Arrange
    mock_uow.roles.get_for_user.return_value = [
        AdminRole(id=uuid4(), name="a_role", display_name="A"),
        AdminRole(id=uuid4(), name="b_role", display_name="B"),
    ]
    mock_uow.permissions.get_for_roles.return_value = [
        _permission("events", "view"),
        _permission("posts", "publish"),
    ]
    gate = AuthorizationGate(mock_uow)

    # Act
    pairs = await gate.get_permission_pairs(uuid4())

    # Assert
    assert pairs == frozenset({("events", "view"), ("posts", "publish")})


@pytest.mark.asyncio
async def test_no_wildcard_or_implied_actions(mock_uow):
    """manage does not imply edit, and a module name is not a wildcard"""
    # Arrange
    mock_uow.roles.get_for_user.return_value = [
        AdminRole(id=uuid4(), name="manager", display_name="Manager")
    ]
    mock_uow.permissions.get_for_roles.return_value = [_permission("whats_on", "manage")]
    gate = AuthorizationGate(mock_uow)

    # Act / Assert
    assert await gate.check_permission(uuid4(), "whats_on", "edit") is False
    assert await gate.check_permission(uuid4(), "whats_on", "*") is False


@pytest.mark.asyncio
async def test_lookup_failure_denies(mock_uow):
    # Arrange
    mock_uow.roles.get_for_user.side_effect = RuntimeError("store unreachable")
    gate = AuthorizationGate(mock_uow)

    # Act / Assert
    assert await gate.check_permission(uuid4(), "events", "view") is False
    assert await gate.has_any_permission(uuid4(), [("events", "view")]) is False
    assert await gate.has_all_permissions(uuid4(), [("events", "view")]) is False


@pytest.mark.asyncio
async def test_has_any_and_has_all(mock_uow):
    # Arrange
    mock_uow.roles.get_for_user.return_value = [
        AdminRole(id=uuid4(), name="viewer", display_name="Viewer")
    ]
    mock_uow.permissions.get_for_roles.return_value = [
        _permission("events", "view"),
        _permission("tenants", "view"),
    ]
    gate = AuthorizationGate(mock_uow)
    user_id = uuid4()

    # Act / Assert
    assert await gate.has_any_permission(user_id, [("events", "edit"), ("tenants", "view")])
    assert not await gate.has_any_permission(user_id, [("events", "edit")])
    assert await gate.has_all_permissions(user_id, [("events", "view"), ("tenants", "view")])
    assert not await gate.has_all_permissions(user_id, [("events", "view"), ("events", "edit")])
