"""
List Permissions Use Case

Returns the permission catalog for the role editor.
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ADMIN_ROLES, VIEW
from .dtos import PermissionResponse


class ListPermissionsUseCase:
    """
    Use case for listing permissions.

    Business Rules:
    - Requires admin_roles:view
    - Ordered by module, then action
    - Retired (inactive) permissions are hidden unless asked for
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load permissions")
    async def execute(
        self, actor_id: UUID, include_inactive: bool = False
    ) -> Result[List[PermissionResponse]]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view permissions")
                )

            permissions = await self.uow.permissions.list_all(
                include_inactive=include_inactive
            )
            return Return.ok([PermissionResponse.from_entity(p) for p in permissions])
