"""
Aggregate By Module Use Case

Entry counts per module for the dashboard chart.
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ACTIVITY_LOGS, VIEW
from .dtos import ModuleCount


class AggregateByModuleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load activity statistics")
    async def execute(self, actor_id: UUID) -> Result[List[ModuleCount]]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ACTIVITY_LOGS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view activity logs")
                )

            counts = await self.uow.activity_logs.count_by_module()
            counts = sorted(counts, key=lambda mc: (-mc[1], mc[0]))
            return Return.ok([ModuleCount(module=m, count=c) for m, c in counts])
