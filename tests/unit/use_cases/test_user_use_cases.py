from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from mall_access.app.services.passwords import TEMP_PASSWORD_ALPHABET, verify_password
from mall_access.app.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    SetUserRolesUseCase,
    ToggleUserStatusUseCase,
    UpdateUserUseCase,
)
from mall_access.domain.entities import AdminRole


def _role(name="viewer", sort_order=1):
    return AdminRole(
        id=uuid4(), name=name, display_name=name.title(), color="#059669", sort_order=sort_order
    )


@pytest.mark.asyncio
async def test_create_user_returns_temporary_password(mock_uow, grant):
    """Without invitation the administrator receives the credential once"""
    # Arrange
    grant(("admin_users", "create"))
    actor_id = uuid4()
    role = _role()
    mock_uow.roles.get_by_ids.return_value = [role]

    # Act
    result = await CreateUserUseCase(mock_uow).execute(
        actor_id, "  Jane@Mall.EXAMPLE.COM ", "Jane Doe", [role.id]
    )

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.user.email == "jane@mall.example.com"
    assert response.invitation_sent is False
    assert len(response.temporary_password) == 12
    assert all(c in TEMP_PASSWORD_ALPHABET for c in response.temporary_password)

    created = mock_uow.users.create.call_args.args[0]
    assert created.password_hash != response.temporary_password
    assert verify_password(response.temporary_password, created.password_hash)

    mock_uow.user_roles.replace_for_user.assert_called_once_with(
        created.id, [role.id], actor_id
    )

    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert entry.action == "create"
    assert entry.resource_type == "admin_user"
    assert "password" not in str(entry.new_values)


@pytest.mark.asyncio
async def test_create_user_with_invitation_hides_password(mock_uow, grant):
    # Arrange
    grant(("admin_users", "create"))
    role = _role()
    mock_uow.roles.get_by_ids.return_value = [role]
    notifier = AsyncMock()

    # Act
    result = await CreateUserUseCase(mock_uow, notifier).execute(
        uuid4(), "jane@mall.example.com", "Jane Doe", [role.id], send_invitation=True
    )

    # Assert
    assert result.is_ok()
    assert result.value.temporary_password is None
    assert result.value.invitation_sent is True
    email, full_name, temporary_password = notifier.send_invitation.call_args.args
    assert email == "jane@mall.example.com"
    assert len(temporary_password) == 12


@pytest.mark.asyncio
async def test_create_user_notifier_failure_not_surfaced(mock_uow, grant):
    # Arrange
    grant(("admin_users", "create"))
    role = _role()
    mock_uow.roles.get_by_ids.return_value = [role]
    notifier = AsyncMock()
    notifier.send_invitation.side_effect = ConnectionError("smtp down")

    # Act
    result = await CreateUserUseCase(mock_uow, notifier).execute(
        uuid4(), "jane@mall.example.com", "Jane Doe", [role.id], send_invitation=True
    )

    # Assert
    assert result.is_ok()
    assert result.value.invitation_sent is False
    mock_uow.users.create.assert_called_once()


@pytest.mark.asyncio
async def test_create_user_duplicate_email(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "create"))
    role = _role()
    mock_uow.roles.get_by_ids.return_value = [role]
    mock_uow.users.get_by_email.return_value = make_user()

    # Act
    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "JANE@mall.example.com", "Jane Again", [role.id]
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.get_by_email.assert_called_once_with("jane@mall.example.com")
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_user_requires_a_role(mock_uow, grant):
    grant(("admin_users", "create"))

    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "jane@mall.example.com", "Jane Doe", []
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_user_invalid_email(mock_uow, grant):
    grant(("admin_users", "create"))

    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "not-an-email", "Jane Doe", [uuid4()]
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_user_rejects_reserved_domain(mock_uow, grant):
    grant(("admin_users", "create"))

    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "jane@mall.test", "Jane Doe", [uuid4()]
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_user_accepts_example_domain(mock_uow, grant):
    grant(("admin_users", "create"))
    role = _role()
    mock_uow.roles.get_by_ids.return_value = [role]

    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "jane@mall.example.com", "Jane Doe", [role.id]
    )

    assert result.is_ok()
    assert result.value.user.email == "jane@mall.example.com"


@pytest.mark.asyncio
async def test_create_user_forbidden(mock_uow, grant):
    # Arrange
    grant(("admin_users", "view"))

    # Act
    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "jane@mall.example.com", "Jane Doe", [uuid4()]
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.users.create.assert_not_called()
    mock_uow.activity_logs.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_user_succeeds_when_audit_write_fails(mock_uow, grant):
    """The mutation stands even if its activity entry is lost"""
    # Arrange
    grant(("admin_users", "create"))
    role = _role()
    mock_uow.roles.get_by_ids.return_value = [role]
    mock_uow.activity_logs.create.side_effect = RuntimeError("audit table locked")

    # Act
    result = await CreateUserUseCase(mock_uow).execute(
        uuid4(), "jane@mall.example.com", "Jane Doe", [role.id]
    )

    # Assert
    assert result.is_ok()
    mock_uow.users.create.assert_called_once()
    mock_uow.commit.assert_called_once()
    mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_delete_self_is_rejected_before_store_access(mock_uow, grant):
    # Arrange
    grant(("admin_users", "delete"))
    actor_id = uuid4()

    # Act
    result = await DeleteUserUseCase(mock_uow).execute(actor_id, actor_id)

    # Assert
    assert result.is_err()
    assert result.error.code == "CANNOT_DELETE_SELF"
    assert result.error.message == "You cannot delete your own account"
    mock_uow.roles.get_for_user.assert_not_called()
    mock_uow.users.get_by_id.assert_not_called()
    mock_uow.users.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user_removes_grants_then_user(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "delete"))
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    # Act
    result = await DeleteUserUseCase(mock_uow).execute(uuid4(), user.id)

    # Assert
    assert result.is_ok()
    mock_uow.user_roles.delete_for_user.assert_called_once_with(user.id)
    mock_uow.users.delete.assert_called_once_with(user)
    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert entry.action == "delete"
    assert entry.resource_name == "Jane Doe"


@pytest.mark.asyncio
async def test_delete_unknown_user(mock_uow, grant):
    grant(("admin_users", "delete"))

    result = await DeleteUserUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_toggle_self_deactivation_rejected(mock_uow, grant):
    grant(("admin_users", "edit"))
    actor_id = uuid4()

    result = await ToggleUserStatusUseCase(mock_uow).execute(actor_id, actor_id, False)

    assert result.is_err()
    assert result.error.code == "CANNOT_DEACTIVATE_SELF"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_toggle_user_status(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "edit"))
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    # Act
    result = await ToggleUserStatusUseCase(mock_uow).execute(uuid4(), user.id, False)

    # Assert
    assert result.is_ok()
    assert result.value.is_active is False
    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert entry.action == "toggle"
    assert entry.old_values == {"is_active": True}
    assert entry.new_values == {"is_active": False}


@pytest.mark.asyncio
async def test_update_user_self_deactivation_rejected(mock_uow, grant, make_user):
    grant(("admin_users", "edit"))
    actor = make_user()
    mock_uow.users.get_by_id.return_value = actor

    result = await UpdateUserUseCase(mock_uow).execute(actor.id, actor.id, is_active=False)

    assert result.is_err()
    assert result.error.code == "CANNOT_DEACTIVATE_SELF"


@pytest.mark.asyncio
async def test_update_user_email_collision(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "edit"))
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.get_by_email.return_value = make_user(email="taken@mall.example.com")

    # Act
    result = await UpdateUserUseCase(mock_uow).execute(
        uuid4(), user.id, email="taken@mall.example.com"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_update_user_fields_and_roles(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "edit"))
    actor_id = uuid4()
    user = make_user()
    old_role, new_role = _role("viewer"), _role("content_manager", 2)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.user_roles.get_role_ids_for_user.return_value = [old_role.id]
    mock_uow.roles.get_by_ids.return_value = [new_role]

    # Act
    result = await UpdateUserUseCase(mock_uow).execute(
        actor_id,
        user.id,
        full_name="Jane Smith",
        avatar_url="https://cdn.mall.example.com/jane.png",
        role_ids=[new_role.id],
    )

    # Assert
    assert result.is_ok()
    mock_uow.user_roles.replace_for_user.assert_called_once_with(
        user.id, [new_role.id], actor_id
    )
    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert set(entry.new_values) == {"full_name", "avatar_url", "role_ids"}
    assert entry.old_values["full_name"] == "Jane Doe"


@pytest.mark.asyncio
async def test_update_user_rejects_bad_avatar_url(mock_uow, grant, make_user):
    grant(("admin_users", "edit"))
    mock_uow.users.get_by_id.return_value = make_user()

    result = await UpdateUserUseCase(mock_uow).execute(
        uuid4(), uuid4(), avatar_url="javascript:alert(1)"
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_set_user_roles_replaces_all(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "manage_roles"))
    actor_id = uuid4()
    user = make_user()
    editor = _role("editor")
    mock_uow.users.get_by_id.return_value = user
    mock_uow.roles.get_by_ids.return_value = [editor]
    mock_uow.user_roles.get_role_ids_for_user.return_value = [uuid4(), uuid4()]

    # Act
    result = await SetUserRolesUseCase(mock_uow).execute(
        actor_id, user.id, [editor.id, editor.id]
    )

    # Assert
    assert result.is_ok()
    mock_uow.user_roles.replace_for_user.assert_called_once_with(
        user.id, [editor.id], actor_id
    )
    entry = mock_uow.activity_logs.create.call_args.args[0]
    assert len(entry.old_values["role_ids"]) == 2
    assert entry.new_values == {"role_ids": [str(editor.id)]}


@pytest.mark.asyncio
async def test_set_user_roles_empty_revokes_everything(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "manage_roles"))
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    # Act
    result = await SetUserRolesUseCase(mock_uow).execute(uuid4(), user.id, [])

    # Assert
    assert result.is_ok()
    assert mock_uow.user_roles.replace_for_user.call_args.args[1] == []
    mock_uow.roles.get_by_ids.assert_not_called()


@pytest.mark.asyncio
async def test_set_user_roles_unknown_role(mock_uow, grant, make_user):
    grant(("admin_users", "manage_roles"))
    mock_uow.users.get_by_id.return_value = make_user()

    result = await SetUserRolesUseCase(mock_uow).execute(uuid4(), uuid4(), [uuid4()])

    assert result.is_err()
    assert result.error.code == "ROLE_NOT_FOUND"
    mock_uow.user_roles.replace_for_user.assert_not_called()


@pytest.mark.asyncio
async def test_list_users_pagination(mock_uow, grant, make_user):
    # Arrange
    grant(("admin_users", "view"))
    role = _role()
    users = [make_user(), make_user(email="b@mall.example.com")]
    mock_uow.users.list_paginated.return_value = (users, 45)
    mock_uow.user_roles.get_role_ids_for_users.return_value = {users[0].id: [role.id]}
    mock_uow.roles.get_by_ids.return_value = [role]

    # Act
    result = await ListUsersUseCase(mock_uow).execute(
        uuid4(), search=" jane ", status="active", page=3, per_page=20
    )

    # Assert
    assert result.is_ok()
    page = result.value
    assert page.total == 45
    assert page.total_pages == 3
    assert [r.name for r in page.items[0].roles] == ["viewer"]
    assert page.items[1].roles == []
    mock_uow.users.list_paginated.assert_called_once_with(
        search="jane", is_active=True, role_id=None, offset=40, limit=20
    )


@pytest.mark.asyncio
async def test_list_users_invalid_status(mock_uow, grant):
    grant(("admin_users", "view"))

    result = await ListUsersUseCase(mock_uow).execute(uuid4(), status="deleted")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
