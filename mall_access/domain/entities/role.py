"""
AdminRole Entity

A named, reusable bundle of permissions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from mall_access.domain.base import utcnow


class AdminRole(SQLModel, table=True):
    """
    AdminRole entity - named bundle of permissions.

    Business Rules:
    - name is the machine key, unique across all roles (active or not)
    - sort_order is assigned as max + 1 on creation
    - color is set by the caller; CreateRole falls back to ApplicationConfig.DEFAULT_ROLE_COLOR
    - Cannot be deleted while any user holds it
    """

    __tablename__ = "admin_roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)
    display_name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    color: str = Field(max_length=7)
    is_active: bool = Field(default=True)
    sort_order: int = Field(default=0, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
