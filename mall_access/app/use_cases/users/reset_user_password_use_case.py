"""
Reset User Password Use Case

An administrator sets a new password for another user.
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.passwords import hash_password, password_policy_violation
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.base import utcnow
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_USERS, EDIT
from .dtos import UserStatusResponse


class ResetUserPasswordUseCase:
    """
    Use case for an administrative password reset.

    Business Rules:
    - Requires admin_users:edit
    - New password must satisfy the password policy
    - Audited without any credential material
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to reset password")
    async def execute(
        self, actor_id: UUID, user_id: UUID, new_password: str
    ) -> Result[UserStatusResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, EDIT):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to edit users")
                )

            violation = password_policy_violation(new_password)
            if violation:
                return Return.err(Error("INVALID_PASSWORD", violation))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.password_hash = hash_password(new_password)
            user.updated_at = utcnow()
            await self.uow.users.update(user)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.update.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=user.id,
                resource_name=user.full_name,
                metadata={"password_reset": True},
            )

            return Return.ok(
                UserStatusResponse(status="updated", message="Password reset successfully")
            )
