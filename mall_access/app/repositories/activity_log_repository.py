from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Tuple
from uuid import UUID

from mall_access.domain.entities import ActivityLog


@dataclass
class ActivityLogQuery:
    """Filters for the paginated activity listing"""

    search: Optional[str] = None
    action: Optional[str] = None
    module: Optional[str] = None
    actor_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    offset: int = 0
    limit: int = 20


class IActivityLogRepository(ABC):
    """
    ActivityLog repository interface - application layer

    Append-only: no update or delete.
    """

    @abstractmethod
    async def create(self, entry: ActivityLog) -> ActivityLog:
        """Append a new entry (immutable)"""
        pass

    @abstractmethod
    async def get_by_id(self, entry_id: UUID) -> Optional[ActivityLog]:
        """Get a single entry"""
        pass

    @abstractmethod
    async def list_paginated(
        self, query: ActivityLogQuery
    ) -> Tuple[List[ActivityLog], int]:
        """
        Filtered page of entries.

        Returns:
            Tuple of (entries ordered by created_at DESC then id DESC,
            total matching count)
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[ActivityLog]:
        """Newest entries first"""
        pass

    @abstractmethod
    async def count_by_module(self) -> List[Tuple[str, int]]:
        """(module, count) pairs, largest count first"""
        pass

    @abstractmethod
    async def count_by_day_since(self, since: datetime) -> List[Tuple[date, int]]:
        """(day, count) for days with entries written at or after since, oldest first"""
        pass
