"""
Get Role Use Case

Returns one role with its resolved permissions.
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.permissions.dtos import PermissionResponse
from mall_access.domain.permission_catalog import ADMIN_ROLES, VIEW
from .dtos import RoleDetailResponse, RoleResponse


class GetRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load role")
    async def execute(self, actor_id: UUID, role_id: UUID) -> Result[RoleDetailResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view roles")
                )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))

            permission_ids = await self.uow.role_permissions.get_permission_ids_for_role(
                role.id
            )
            permissions = []
            if permission_ids:
                permissions = await self.uow.permissions.get_by_ids(permission_ids)
            permissions = sorted(permissions, key=lambda p: (p.module, p.action))

            return Return.ok(
                RoleDetailResponse(
                    **RoleResponse.from_entity(role).model_dump(),
                    permissions=[PermissionResponse.from_entity(p) for p in permissions],
                )
            )
