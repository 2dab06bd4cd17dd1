"""
AdminUser Entity

An authenticated principal of the admin dashboard.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from mall_access.domain.base import utcnow


class AdminUser(SQLModel, table=True):
    """
    AdminUser entity - a principal that can hold roles.

    Business Rules:
    - Email is unique and stored lowercased, so case variants collide
    - Password stored as bcrypt hash only
    - Created by invitation with a temporary credential
    - Users cannot delete or deactivate themselves
    """

    __tablename__ = "admin_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    full_name: str = Field(max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    avatar_url: Optional[str] = Field(default=None, max_length=2048)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_admin_user_is_active", "is_active"),)
