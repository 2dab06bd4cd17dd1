"""
Delete User Use Case
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_USERS, DELETE
from .dtos import UserStatusResponse
from .validation import user_snapshot


class DeleteUserUseCase:
    """
    Use case for deleting an admin user.

    Business Rules:
    - Users cannot delete themselves; checked before any store access
    - Requires admin_users:delete
    - Role grants are removed with the user, in one transaction
    - Activity entries written by the user are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to delete user")
    async def execute(self, actor_id: UUID, user_id: UUID) -> Result[UserStatusResponse]:
        if user_id == actor_id:
            return Return.err(
                Error("CANNOT_DELETE_SELF", "You cannot delete your own account")
            )

        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, DELETE):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to delete users")
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            role_ids = await self.uow.user_roles.get_role_ids_for_user(user.id)
            old_values = user_snapshot(user, role_ids)

            await self.uow.user_roles.delete_for_user(user.id)
            await self.uow.users.delete(user)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.delete.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=user_id,
                resource_name=old_values["full_name"],
                old_values=old_values,
            )

            return Return.ok(
                UserStatusResponse(status="deleted", message="User deleted successfully")
            )
