"""
Permission Use Case DTOs (Data Transfer Objects)

Response classes for the permission catalog.
"""

from typing import Optional

from pydantic import BaseModel

from mall_access.domain.entities import AdminPermission


class PermissionResponse(BaseModel):
    """A single checkable capability"""

    id: str
    name: str
    module: str
    action: str
    display_name: str
    description: Optional[str] = None
    is_active: bool

    @classmethod
    def from_entity(cls, permission: AdminPermission) -> "PermissionResponse":
        return cls(
            id=str(permission.id),
            name=permission.name,
            module=permission.module,
            action=permission.action,
            display_name=permission.display_name,
            description=permission.description,
            is_active=permission.is_active,
        )
