"""
AdminPermission Entity

One checkable (module, action) capability.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from mall_access.domain.base import utcnow


class AdminPermission(SQLModel, table=True):
    """
    AdminPermission entity - a (module, action) capability.

    Business Rules:
    - (module, action) is unique among active permissions
    - Retired by deactivation, never deleted, so old grants stay inspectable
    - Inactive permissions grant nothing
    """

    __tablename__ = "admin_permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)  # "module.action"
    module: str = Field(max_length=50, index=True)
    action: str = Field(max_length=50)
    display_name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_permission_active_module_action",
            "module",
            "action",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
    )

    @property
    def pair(self) -> tuple[str, str]:
        return (self.module, self.action)
