"""
User Use Case DTOs (Data Transfer Objects)

All Response classes for the admin user domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from mall_access.domain.entities import AdminRole, AdminUser


class UserRoleInfo(BaseModel):
    """Role badge shown next to a user"""

    id: str
    name: str
    display_name: str
    color: str

    @classmethod
    def from_entity(cls, role: AdminRole) -> "UserRoleInfo":
        return cls(
            id=str(role.id),
            name=role.name,
            display_name=role.display_name,
            color=role.color,
        )


class UserResponse(BaseModel):
    """Admin user with assigned roles"""

    id: str
    email: str
    full_name: str
    avatar_url: Optional[str] = None
    is_active: bool
    last_login_at: Optional[str] = None
    created_at: str
    updated_at: str
    roles: List[UserRoleInfo]

    @classmethod
    def from_entity(cls, user: AdminUser, roles: List[AdminRole]) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            is_active=user.is_active,
            last_login_at=(
                user.last_login_at.isoformat() + "Z" if user.last_login_at else None
            ),
            created_at=user.created_at.isoformat() + "Z",
            updated_at=user.updated_at.isoformat() + "Z",
            roles=[UserRoleInfo.from_entity(r) for r in roles],
        )


class CreateUserResponse(BaseModel):
    """
    Response for create user use case.

    temporary_password is only returned when no invitation was requested.
    """

    user: UserResponse
    invitation_sent: bool
    temporary_password: Optional[str] = None


class UserListResponse(BaseModel):
    """Page of admin users"""

    items: List[UserResponse]
    total: int
    page: int
    per_page: int
    total_pages: int


class UserStatusResponse(BaseModel):
    """Response for status-only operations"""

    status: str
    message: str
