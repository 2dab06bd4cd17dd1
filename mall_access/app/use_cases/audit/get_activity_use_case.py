"""
Get Activity Use Case
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ACTIVITY_LOGS, VIEW
from .dtos import ActivityEntryResponse
from .views import build_entry_responses


class GetActivityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load activity")
    async def execute(
        self, actor_id: UUID, entry_id: UUID
    ) -> Result[ActivityEntryResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ACTIVITY_LOGS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view activity logs")
                )

            entry = await self.uow.activity_logs.get_by_id(entry_id)
            if entry is None:
                return Return.err(
                    Error("ACTIVITY_NOT_FOUND", "Activity entry not found")
                )

            return Return.ok((await build_entry_responses(self.uow, [entry]))[0])
