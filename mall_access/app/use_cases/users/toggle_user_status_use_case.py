"""
Toggle User Status Use Case

Activates or deactivates an admin account.
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.base import utcnow
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_USERS, EDIT
from .dtos import UserResponse
from .views import build_user_response


class ToggleUserStatusUseCase:
    """
    Use case for changing a user's active flag.

    Business Rules:
    - Users cannot deactivate themselves; checked before any store access
    - Requires admin_users:edit
    - Inactive users can no longer sign in or pass principal resolution
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to update user status")
    async def execute(
        self, actor_id: UUID, user_id: UUID, is_active: bool
    ) -> Result[UserResponse]:
        if not is_active and user_id == actor_id:
            return Return.err(
                Error("CANNOT_DEACTIVATE_SELF", "You cannot deactivate your own account")
            )

        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, EDIT):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to edit users")
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            was_active = user.is_active
            user.is_active = is_active
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.toggle.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=user.id,
                resource_name=user.full_name,
                old_values={"is_active": was_active},
                new_values={"is_active": is_active},
            )

            return Return.ok(await build_user_response(self.uow, user))
