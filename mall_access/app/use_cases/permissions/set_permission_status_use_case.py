"""
Set Permission Status Use Case

Retires or restores a permission. Permissions are never deleted: roles keep
their grant rows, and an inactive permission simply stops granting anything.
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule
from mall_access.domain.permission_catalog import ADMIN_ROLES, MANAGE
from .dtos import PermissionResponse


class SetPermissionStatusUseCase:
    """
    Use case for activating or deactivating a permission.

    Business Rules:
    - Requires admin_roles:manage
    - Reactivation fails if another active permission holds the same pair
    - No-op changes still succeed and are not audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to update permission")
    async def execute(
        self, actor_id: UUID, permission_id: UUID, is_active: bool
    ) -> Result[PermissionResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, MANAGE):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to manage permissions")
                )

            permission = await self.uow.permissions.get_by_id(permission_id)
            if permission is None:
                return Return.err(Error("PERMISSION_NOT_FOUND", "Permission not found"))

            if permission.is_active == is_active:
                return Return.ok(PermissionResponse.from_entity(permission))

            if is_active:
                holder = await self.uow.permissions.get_active_by_pair(
                    permission.module, permission.action
                )
                if holder is not None and holder.id != permission.id:
                    return Return.err(
                        Error(
                            "PERMISSION_EXISTS",
                            f"Permission {permission.name} is already active",
                        )
                    )

            permission.is_active = is_active
            permission = await self.uow.permissions.update(permission)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.toggle.value,
                ActivityModule.users.value,
                resource_type="admin_permission",
                resource_id=permission.id,
                resource_name=permission.name,
                old_values={"is_active": not is_active},
                new_values={"is_active": is_active},
            )

            return Return.ok(PermissionResponse.from_entity(permission))
