"""
Recent Activity Use Case

Newest entries for the dashboard widget.
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ACTIVITY_LOGS, VIEW
from .dtos import ActivityEntryResponse
from .views import build_entry_responses

MAX_RECENT = 50


class RecentActivityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load activity")
    async def execute(
        self, actor_id: UUID, limit: int = 10
    ) -> Result[List[ActivityEntryResponse]]:
        if not 1 <= limit <= MAX_RECENT:
            return Return.err(
                Error("VALIDATION_ERROR", f"limit must be between 1 and {MAX_RECENT}")
            )

        async with self.uow:
            if not await self.gate.check_permission(actor_id, ACTIVITY_LOGS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view activity logs")
                )

            entries = await self.uow.activity_logs.list_recent(limit)
            return Return.ok(await build_entry_responses(self.uow, entries))
