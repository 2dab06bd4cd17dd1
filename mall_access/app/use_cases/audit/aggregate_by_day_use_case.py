"""
Aggregate By Day Use Case

Entry counts per calendar day (UTC) for the activity timeline.
"""

from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID

from config import ApplicationConfig
from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.base import utcnow
from mall_access.domain.permission_catalog import ACTIVITY_LOGS, VIEW
from .dtos import DayCount

MAX_DAYS = 366


class AggregateByDayUseCase:
    """
    Use case for the per-day activity rollup.

    Business Rules:
    - Requires activity_logs:view
    - One bucket per day from today - last_n_days to today, inclusive
    - Days without activity are present with count 0
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load activity statistics")
    async def execute(
        self,
        actor_id: UUID,
        last_n_days: int = ApplicationConfig.ACTIVITY_CHART_DAYS,
        now: Optional[datetime] = None,
    ) -> Result[List[DayCount]]:
        if not 0 <= last_n_days <= MAX_DAYS:
            return Return.err(
                Error("VALIDATION_ERROR", f"days must be between 0 and {MAX_DAYS}")
            )

        async with self.uow:
            if not await self.gate.check_permission(actor_id, ACTIVITY_LOGS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view activity logs")
                )

            today = (now or utcnow()).date()
            first_day = today - timedelta(days=last_n_days)
            since = datetime.combine(first_day, datetime.min.time())

            per_day = dict(await self.uow.activity_logs.count_by_day_since(since))

            buckets = []
            for offset in range(last_n_days + 1):
                day = first_day + timedelta(days=offset)
                buckets.append(DayCount(date=day.isoformat(), count=per_day.get(day, 0)))
            return Return.ok(buckets)
