"""
List Roles Use Case
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ADMIN_ROLES, VIEW
from .dtos import RoleResponse


class ListRolesUseCase:
    """All roles, active or not, ordered by sort_order. Requires admin_roles:view."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load roles")
    async def execute(self, actor_id: UUID) -> Result[List[RoleResponse]]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view roles")
                )

            roles = await self.uow.roles.list_all()
            return Return.ok([RoleResponse.from_entity(r) for r in roles])
