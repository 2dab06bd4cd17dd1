from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.app.repositories.activity_log_repository import (
    ActivityLogQuery,
    IActivityLogRepository,
)
from mall_access.domain.entities import ActivityLog


def _as_date(value) -> date:
    # SQLite returns DATE() as text
    if isinstance(value, str):
        return date.fromisoformat(value)
    if isinstance(value, datetime):
        return value.date()
    return value


class ActivityLogRepository(IActivityLogRepository):
    """ActivityLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: ActivityLog) -> ActivityLog:
        """Create a new entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_by_id(self, entry_id: UUID) -> Optional[ActivityLog]:
        stmt = select(ActivityLog).where(ActivityLog.id == entry_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_paginated(
        self, query: ActivityLogQuery
    ) -> Tuple[List[ActivityLog], int]:
        conditions = []
        if query.search:
            pattern = f"%{query.search}%"
            conditions.append(
                or_(
                    col(ActivityLog.resource_name).ilike(pattern),
                    col(ActivityLog.module).ilike(pattern),
                    col(ActivityLog.action).ilike(pattern),
                )
            )
        if query.action:
            conditions.append(ActivityLog.action == query.action)
        if query.module:
            conditions.append(ActivityLog.module == query.module)
        if query.actor_id:
            conditions.append(ActivityLog.actor_id == query.actor_id)
        # Calendar-day bounds: [start 00:00, end + 1 day 00:00)
        if query.start_date:
            start = datetime.combine(query.start_date, datetime.min.time())
            conditions.append(col(ActivityLog.created_at) >= start)
        if query.end_date:
            end = datetime.combine(query.end_date + timedelta(days=1), datetime.min.time())
            conditions.append(col(ActivityLog.created_at) < end)

        count_stmt = select(func.count()).select_from(ActivityLog).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(ActivityLog)
            .where(*conditions)
            .order_by(col(ActivityLog.created_at).desc(), col(ActivityLog.id).desc())
            .offset(query.offset)
            .limit(query.limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all()), total

    async def list_recent(self, limit: int) -> List[ActivityLog]:
        stmt = (
            select(ActivityLog)
            .order_by(col(ActivityLog.created_at).desc(), col(ActivityLog.id).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_module(self) -> List[Tuple[str, int]]:
        entries = func.count(ActivityLog.id)
        stmt = (
            select(ActivityLog.module, entries)
            .group_by(ActivityLog.module)
            .order_by(entries.desc(), col(ActivityLog.module))
        )
        result = await self.session.exec(stmt)
        return [(module, count) for module, count in result.all()]

    async def count_by_day_since(self, since: datetime) -> List[Tuple[date, int]]:
        day = func.date(ActivityLog.created_at)
        stmt = (
            select(day, func.count(ActivityLog.id))
            .where(col(ActivityLog.created_at) >= since)
            .group_by(day)
            .order_by(day)
        )
        result = await self.session.exec(stmt)
        return [(_as_date(value), count) for value, count in result.all()]
