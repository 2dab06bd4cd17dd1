"""
List Users With Role Use Case

Shows who holds a role, e.g. before an administrator tries to delete it.
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ADMIN_ROLES, VIEW
from .dtos import RoleMemberResponse


class ListUsersWithRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load role members")
    async def execute(
        self, actor_id: UUID, role_id: UUID
    ) -> Result[List[RoleMemberResponse]]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view roles")
                )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))

            user_ids = await self.uow.user_roles.get_user_ids_for_role(role.id)
            if not user_ids:
                return Return.ok([])

            users = await self.uow.users.get_by_ids(user_ids)
            users = sorted(users, key=lambda u: u.full_name.lower())
            return Return.ok([RoleMemberResponse.from_entity(u) for u in users])
