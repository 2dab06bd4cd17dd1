"""
Create Permission Use Case

Adds a (module, action) pair to the catalog at runtime.
"""

import re
from typing import Optional
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule, AdminPermission
from mall_access.domain.permission_catalog import (
    ADMIN_ROLES,
    MANAGE,
    permission_display_name,
    permission_name,
)
from .dtos import PermissionResponse

PERMISSION_KEY_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


class CreatePermissionUseCase:
    """
    Use case for creating a permission.

    Business Rules:
    - Requires admin_roles:manage
    - module and action are lowercase snake_case keys
    - Only one active permission per (module, action)
    - Display name defaults to "<Action> <Module>"
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to create permission")
    async def execute(
        self,
        actor_id: UUID,
        module: str,
        action: str,
        display_name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Result[PermissionResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, MANAGE):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to manage permissions")
                )

            module = module.strip()
            action = action.strip()
            for key in (module, action):
                if not PERMISSION_KEY_PATTERN.match(key) or len(key) > 50:
                    return Return.err(
                        Error(
                            "VALIDATION_ERROR",
                            f"Invalid permission key: {key!r}. Use lowercase letters, digits and underscores",
                        )
                    )

            existing = await self.uow.permissions.get_active_by_pair(module, action)
            if existing is not None:
                return Return.err(
                    Error(
                        "PERMISSION_EXISTS",
                        f"Permission {permission_name(module, action)} already exists",
                    )
                )

            permission = AdminPermission(
                name=permission_name(module, action),
                module=module,
                action=action,
                display_name=(display_name or "").strip()
                or permission_display_name(module, action),
                description=description,
            )
            permission = await self.uow.permissions.create(permission)
            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.create.value,
                ActivityModule.users.value,
                resource_type="admin_permission",
                resource_id=permission.id,
                resource_name=permission.name,
                new_values={
                    "module": module,
                    "action": action,
                    "display_name": permission.display_name,
                },
            )

            return Return.ok(PermissionResponse.from_entity(permission))
