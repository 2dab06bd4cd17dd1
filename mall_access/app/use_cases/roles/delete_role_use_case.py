"""
Delete Role Use Case
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_ROLES, DELETE
from .dtos import DeleteRoleResponse
from .validation import role_snapshot


class DeleteRoleUseCase:
    """
    Use case for deleting a role.

    Business Rules:
    - Requires admin_roles:delete
    - Blocked while any user holds the role (ROLE_IN_USE)
    - Grant rows are removed with the role, in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to delete role")
    async def execute(self, actor_id: UUID, role_id: UUID) -> Result[DeleteRoleResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, DELETE):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to delete roles")
                )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))

            holders = await self.uow.user_roles.get_user_ids_for_role(role.id)
            if holders:
                return Return.err(
                    Error(
                        "ROLE_IN_USE",
                        f"Cannot delete role: it is assigned to {len(holders)} user(s)",
                    )
                )

            permission_ids = await self.uow.role_permissions.get_permission_ids_for_role(
                role.id
            )
            old_values = role_snapshot(role, permission_ids)

            await self.uow.role_permissions.delete_for_role(role.id)
            await self.uow.roles.delete(role)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.delete.value,
                ActivityModule.users.value,
                resource_type="admin_role",
                resource_id=role_id,
                resource_name=old_values["display_name"],
                old_values=old_values,
            )

            return Return.ok(DeleteRoleResponse(status="deleted", id=str(role_id)))
