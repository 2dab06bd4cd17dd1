"""
Role Use Case DTOs (Data Transfer Objects)

Response classes for the role store.
"""

from typing import List, Optional

from pydantic import BaseModel

from mall_access.app.use_cases.permissions.dtos import PermissionResponse
from mall_access.domain.entities import AdminRole, AdminUser


class RoleResponse(BaseModel):
    """Role without its permission list"""

    id: str
    name: str
    display_name: str
    description: Optional[str] = None
    color: str
    is_active: bool
    sort_order: int
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, role: AdminRole) -> "RoleResponse":
        return cls(
            id=str(role.id),
            name=role.name,
            display_name=role.display_name,
            description=role.description,
            color=role.color,
            is_active=role.is_active,
            sort_order=role.sort_order,
            created_at=role.created_at.isoformat() + "Z",
            updated_at=role.updated_at.isoformat() + "Z",
        )


class RoleDetailResponse(RoleResponse):
    """Role with its resolved permissions"""

    permissions: List[PermissionResponse]


class RoleMemberResponse(BaseModel):
    """User holding a role"""

    id: str
    email: str
    full_name: str
    avatar_url: Optional[str] = None
    is_active: bool

    @classmethod
    def from_entity(cls, user: AdminUser) -> "RoleMemberResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            is_active=user.is_active,
        )


class DeleteRoleResponse(BaseModel):
    """Response for delete role use case"""

    status: str
    id: str
