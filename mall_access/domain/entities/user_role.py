"""
UserRole and RolePermission join entities.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from mall_access.domain.base import utcnow


class AdminUserRole(SQLModel, table=True):
    """
    Grant of a role to a user.

    Business Rules:
    - At most one row per (user_id, role_id)
    - Rewritten as a whole set whenever a user's roles are edited
    - assigned_by records the acting principal
    """

    __tablename__ = "admin_user_roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="admin_users.id", nullable=False, index=True)
    role_id: UUID = Field(foreign_key="admin_roles.id", nullable=False, index=True)
    assigned_by: Optional[UUID] = Field(default=None)
    assigned_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_user_role_user_role", "user_id", "role_id", unique=True),
    )


class AdminRolePermission(SQLModel, table=True):
    """Membership of a permission in a role's permission set."""

    __tablename__ = "admin_role_permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    role_id: UUID = Field(foreign_key="admin_roles.id", nullable=False, index=True)
    permission_id: UUID = Field(
        foreign_key="admin_permissions.id", nullable=False, index=True
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_role_permission_role_permission",
            "role_id",
            "permission_id",
            unique=True,
        ),
    )
