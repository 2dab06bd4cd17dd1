"""
Update Role Use Case

Edits a role's presentation fields and replaces its permission set.
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
from mall_access.domain.permission_catalog import ADMIN_ROLES, EDIT
from .dtos import RoleResponse
from .validation import role_fields_violation, role_snapshot


class UpdateRoleUseCase:
    """
    Use case for updating a role.

    Business Rules:
    - Requires admin_roles:edit
    - A name held by another role is a conflict
    - Otherwise the name cannot change after creation
    - Omitted fields (None) keep their value
    - permission_ids replaces the whole grant set, in the same transaction
      as the row update
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to update role")
    async def execute(
        self,
        actor_id: UUID,
        role_id: UUID,
        name: Optional[str] = None,
        display_name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None,
        is_active: Optional[bool] = None,
        permission_ids: Optional[List[UUID]] = None,
    ) -> Result[RoleResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_ROLES, EDIT):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to edit roles")
                )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))

            if name is not None and name.strip() != role.name:
                holder = await self.uow.roles.get_by_name(name.strip())
                if holder is not None and holder.id != role.id:
                    return Return.err(
                        Error("ROLE_NAME_EXISTS", f"A role named {name.strip()} already exists")
                    )
                return Return.err(
                    Error("VALIDATION_ERROR", "Role name cannot be changed")
                )

            if display_name is not None:
                display_name = display_name.strip()
            violation = role_fields_violation(
                display_name=display_name, description=description, color=color
            )
            if violation:
                return Return.err(Error("VALIDATION_ERROR", violation))

            old_permission_ids = await self.uow.role_permissions.get_permission_ids_for_role(
                role.id
            )
            old_values = role_snapshot(role, old_permission_ids)

            new_permission_ids = old_permission_ids
            if permission_ids is not None:
                new_permission_ids = list(dict.fromkeys(permission_ids))
                if new_permission_ids:
                    found = await self.uow.permissions.get_by_ids(new_permission_ids)
                    if len(found) != len(new_permission_ids):
                        return Return.err(
                            Error("PERMISSION_NOT_FOUND", "One or more permissions not found")
                        )

            if display_name is not None:
                role.display_name = display_name
            if description is not None:
                role.description = description
            if color is not None:
                role.color = color
            if is_active is not None:
                role.is_active = is_active
            role.updated_at = utcnow()
            role = await self.uow.roles.update(role)

            if permission_ids is not None:
                await self.uow.role_permissions.replace_for_role(
                    role.id, new_permission_ids
                )

            await self.uow.commit()

            changed_old, changed_new = diff_values(
                old_values, role_snapshot(role, new_permission_ids)
            )
            await self.activity.record(
                actor_id,
                ActivityAction.update.value,
                ActivityModule.users.value,
                resource_type="admin_role",
                resource_id=role.id,
                resource_name=role.display_name,
                old_values=changed_old,
                new_values=changed_new,
            )

            return Return.ok(RoleResponse.from_entity(role))
