"""
Change Own Password Use Case
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.passwords import (
    hash_password,
    password_policy_violation,
    verify_password,
)
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.base import utcnow
from mall_access.domain.entities import ActivityAction, ActivityModule
from .dtos import UserStatusResponse


class ChangeOwnPasswordUseCase:
    """
    Use case for a signed-in user changing their password.

    Business Rules:
    - Current password must verify
    - New password must satisfy the policy and differ from the current one
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to change password")
    async def execute(
        self, actor_id: UUID, current_password: str, new_password: str
    ) -> Result[UserStatusResponse]:
        violation = password_policy_violation(new_password)
        if violation:
            return Return.err(Error("INVALID_PASSWORD", violation))
        if new_password == current_password:
            return Return.err(
                Error("INVALID_PASSWORD", "New password must be different from the current one")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(actor_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not verify_password(current_password, user.password_hash):
                return Return.err(
                    Error("INVALID_PASSWORD", "Current password is incorrect")
                )

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
                metadata={"password_changed": True},
            )

            return Return.ok(
                UserStatusResponse(status="updated", message="Password changed successfully")
            )
