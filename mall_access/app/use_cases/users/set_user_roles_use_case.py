"""
Set User Roles Use Case

Replaces the full set of roles held by a user.
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_USERS, MANAGE_ROLES
from .dtos import UserResponse
from .validation import distinct_ids
from .views import build_user_response


class SetUserRolesUseCase:
    """
    Use case for assigning roles to a user.

    Business Rules:
    - Requires admin_users:manage_roles
    - Replace-all, not additive: afterwards the user holds exactly role_ids
    - Empty role_ids revokes every role
    - Delete and insert run in one transaction, readers never see a
      partially applied set
    - Every grant records the assigning principal and time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to update user roles")
    async def execute(
        self, actor_id: UUID, user_id: UUID, role_ids: List[UUID]
    ) -> Result[UserResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, MANAGE_ROLES):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to manage user roles")
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            role_ids = distinct_ids(role_ids)
            if role_ids:
                roles = await self.uow.roles.get_by_ids(role_ids)
                if len(roles) != len(role_ids):
                    return Return.err(
                        Error("ROLE_NOT_FOUND", "One or more roles not found")
                    )

            old_role_ids = await self.uow.user_roles.get_role_ids_for_user(user.id)

            await self.uow.user_roles.replace_for_user(user.id, role_ids, actor_id)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.update.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=user.id,
                resource_name=user.full_name,
                old_values={"role_ids": sorted(str(r) for r in old_role_ids)},
                new_values={"role_ids": sorted(str(r) for r in role_ids)},
            )

            return Return.ok(await build_user_response(self.uow, user))
