"""
Update User Use Case

Edits an admin user's profile, status and roles in one transaction.
"""

from typing import List, Optional
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger, diff_values
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.base import utcnow
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_USERS, EDIT
from .dtos import UserResponse
from .validation import (
    avatar_url_violation,
    distinct_ids,
    email_violation,
    full_name_violation,
    normalize_email,
    user_snapshot,
)
from .views import build_user_response


class UpdateUserUseCase:
    """
    Use case for updating an admin user.

    Business Rules:
    - Requires admin_users:edit
    - Users cannot deactivate themselves
    - Email stays unique after normalization
    - Omitted fields (None) keep their value; empty avatar_url clears it
    - role_ids, when given, replaces every grant and needs at least one role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to update user")
    async def execute(
        self,
        actor_id: UUID,
        user_id: UUID,
        email: Optional[str] = None,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        is_active: Optional[bool] = None,
        role_ids: Optional[List[UUID]] = None,
    ) -> Result[UserResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, EDIT):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to edit users")
                )

            if is_active is False and user_id == actor_id:
                return Return.err(
                    Error("CANNOT_DEACTIVATE_SELF", "You cannot deactivate your own account")
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if email is not None:
                email = normalize_email(email)
            if full_name is not None:
                full_name = full_name.strip()
            violation = (
                (email_violation(email) if email is not None else None)
                or (full_name_violation(full_name) if full_name is not None else None)
                or avatar_url_violation(avatar_url)
            )
            if violation:
                return Return.err(Error("VALIDATION_ERROR", violation))

            if email is not None and email != user.email:
                holder = await self.uow.users.get_by_email(email)
                if holder is not None and holder.id != user.id:
                    return Return.err(
                        Error("EMAIL_ALREADY_EXISTS", "A user with this email already exists")
                    )

            old_role_ids = await self.uow.user_roles.get_role_ids_for_user(user.id)
            new_role_ids = old_role_ids
            if role_ids is not None:
                new_role_ids = distinct_ids(role_ids)
                if not new_role_ids:
                    return Return.err(
                        Error("VALIDATION_ERROR", "At least one role is required")
                    )
                roles = await self.uow.roles.get_by_ids(new_role_ids)
                if len(roles) != len(new_role_ids):
                    return Return.err(
                        Error("ROLE_NOT_FOUND", "One or more roles not found")
                    )

            old_values = user_snapshot(user, old_role_ids)

            if email is not None:
                user.email = email
            if full_name is not None:
                user.full_name = full_name
            if avatar_url is not None:
                user.avatar_url = avatar_url or None
            if is_active is not None:
                user.is_active = is_active
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)

            if role_ids is not None:
                await self.uow.user_roles.replace_for_user(user.id, new_role_ids, actor_id)

            await self.uow.commit()

            changed_old, changed_new = diff_values(
                old_values, user_snapshot(user, new_role_ids)
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
            )

            return Return.ok(await build_user_response(self.uow, user))
