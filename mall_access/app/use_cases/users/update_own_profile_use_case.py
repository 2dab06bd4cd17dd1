"""
Update Own Profile Use Case

Self-service profile edit; needs no permission beyond being signed in.
"""

from typing import Optional
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger, diff_values
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.base import utcnow
from mall_access.domain.entities import ActivityAction, ActivityModule
from .dtos import UserResponse
from .validation import avatar_url_violation, full_name_violation
from .views import build_user_response


class UpdateOwnProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to update profile")
    async def execute(
        self,
        actor_id: UUID,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Result[UserResponse]:
        if full_name is not None:
            full_name = full_name.strip()
        violation = (
            full_name_violation(full_name) if full_name is not None else None
        ) or avatar_url_violation(avatar_url)
        if violation:
            return Return.err(Error("VALIDATION_ERROR", violation))

        async with self.uow:
            user = await self.uow.users.get_by_id(actor_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            old_values = {"full_name": user.full_name, "avatar_url": user.avatar_url}

            if full_name is not None:
                user.full_name = full_name
            if avatar_url is not None:
                user.avatar_url = avatar_url or None
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            changed_old, changed_new = diff_values(
                old_values, {"full_name": user.full_name, "avatar_url": user.avatar_url}
            )
            await self.activity.record(
                actor_id,
                ActivityAction.update.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=user.id,
                resource_name=user.full_name,
                old_values=changed_old,
                new_values=changed_new,
                metadata={"self_service": True},
            )

            return Return.ok(await build_user_response(self.uow, user))
