"""
Create Role Use Case

Creates a role and grants it an initial permission set.
"""

from typing import List, Optional
from uuid import UUID

from config import ApplicationConfig
from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule, AdminRole
from mall_access.domain.permission_catalog import ADMIN_ROLES, CREATE
from .dtos import RoleResponse
from .validation import role_fields_violation, role_snapshot


class CreateRoleUseCase:
    """
    Use case for creating a role.

    Business Rules:
    - Requires admin_roles:create
    - Name is unique across all roles, case-insensitive
    - sort_order is max existing + 1
    - One grant row per distinct permission id; unknown ids are rejected
    - Role row and grants are written in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to create role")
    async def execute(
        self,
        actor_id: UUID,
        name: str,
        display_name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
        is_active: bool = True,
        permission_ids: Optional[List[UUID]] = None,
    ) -> Result[RoleResponse]:
        """
        Execute create role use case.

        Args:
            actor_id: Principal creating the role
            name: Machine name, immutable afterwards
            display_name: Human readable name
            description: Optional description
            color: Badge color (#RRGGBB), defaults to the indigo used by the UI
            is_active: Initial status
            permission_ids: Permissions granted to the role

        Returns:
            Result with RoleResponse (without permissions), or Error
        """
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, CREATE):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to create roles")
                )

            name = name.strip()
            display_name = display_name.strip()
            color = color or ApplicationConfig.DEFAULT_ROLE_COLOR
            violation = role_fields_violation(name, display_name, description, color)
            if violation:
                return Return.err(Error("VALIDATION_ERROR", violation))

            if await self.uow.roles.get_by_name(name) is not None:
                return Return.err(
                    Error("ROLE_NAME_EXISTS", f"A role named {name} already exists")
                )

            permission_ids = list(dict.fromkeys(permission_ids or []))
            if permission_ids:
                found = await self.uow.permissions.get_by_ids(permission_ids)
                if len(found) != len(permission_ids):
                    return Return.err(
                        Error("PERMISSION_NOT_FOUND", "One or more permissions not found")
                    )

            sort_order = await self.uow.roles.get_max_sort_order() + 1

            role = AdminRole(
                name=name,
                display_name=display_name,
                description=description,
                color=color,
                is_active=is_active,
                sort_order=sort_order,
            )
            role = await self.uow.roles.create(role)

            if permission_ids:
                await self.uow.role_permissions.replace_for_role(role.id, permission_ids)

            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.create.value,
                ActivityModule.users.value,
                resource_type="admin_role",
                resource_id=role.id,
                resource_name=role.display_name,
                new_values=role_snapshot(role, permission_ids),
            )

            return Return.ok(RoleResponse.from_entity(role))
