"""
Audit Use Case DTOs (Data Transfer Objects)

Response classes for activity log queries and dashboard rollups.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from mall_access.domain.entities import ActivityLog, AdminUser


class ActorInfo(BaseModel):
    """Minimal display info of the user behind an entry"""

    id: str
    full_name: str
    email: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_entity(cls, user: AdminUser) -> "ActorInfo":
        return cls(
            id=str(user.id),
            full_name=user.full_name,
            email=user.email,
            avatar_url=user.avatar_url,
        )


class ActivityEntryResponse(BaseModel):
    """
    One activity log entry.

    actor is None for system entries and for users deleted since.
    """

    id: str
    actor_id: str
    actor: Optional[ActorInfo] = None
    action: str
    module: str
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None
    resource_name: Optional[str] = None
    old_values: Optional[Dict[str, Any]] = None
    new_values: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: str

    @classmethod
    def from_entity(
        cls, entry: ActivityLog, actor: Optional[AdminUser]
    ) -> "ActivityEntryResponse":
        return cls(
            id=str(entry.id),
            actor_id=entry.actor_id,
            actor=ActorInfo.from_entity(actor) if actor else None,
            action=entry.action,
            module=entry.module,
            resource_type=entry.resource_type,
            resource_id=entry.resource_id,
            resource_name=entry.resource_name,
            old_values=entry.old_values,
            new_values=entry.new_values,
            metadata=entry.log_metadata,
            created_at=entry.created_at.isoformat() + "Z",
        )


class ActivityListResponse(BaseModel):
    """Page of activity entries"""

    items: List[ActivityEntryResponse]
    total: int
    page: int
    per_page: int
    total_pages: int


class ModuleCount(BaseModel):
    module: str
    count: int


class DayCount(BaseModel):
    date: str
    count: int


class ActorOption(BaseModel):
    """Entry of the actor filter dropdown"""

    id: str
    full_name: str
    email: str
