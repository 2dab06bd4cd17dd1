"""
ActivityLog Entity

Append-only record of authorized mutations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from mall_access.domain.base import utcnow


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity - who changed what, and when.

    Business Rules:
    - Immutable once written (never updated or deleted)
    - actor_id is the acting user's id, or "system"
    - action and module are open vocabularies
    - resource_name is captured at write time; the resource may change or vanish
    - old_values / new_values hold snapshots of the changed fields only
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor_id: str = Field(max_length=64, index=True)
    action: str = Field(max_length=50)
    module: str = Field(max_length=50)

    resource_type: Optional[str] = Field(default=None, max_length=50)
    resource_id: Optional[str] = Field(default=None, max_length=255)
    resource_name: Optional[str] = Field(default=None, max_length=255)

    old_values: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    new_values: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    # "metadata" is reserved on declarative models, the column keeps the name
    log_metadata: Optional[dict] = Field(
        default=None, sa_column=Column("metadata", JSON)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_activity_created_at", "created_at"),
        Index("idx_activity_module_action", "module", "action"),
    )
