"""
Logout Use Case

Tokens are stateless; logging out only leaves a trace in the activity log.
"""

from uuid import UUID

from mall_access.libs.result import Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule
from .dtos import LogoutResponse


class LogoutUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to sign out")
    async def execute(self, actor_id: UUID, full_name: str) -> Result[LogoutResponse]:
        async with self.uow:
            await self.activity.record(
                actor_id,
                ActivityAction.logout.value,
                ActivityModule.auth.value,
                resource_type="admin_user",
                resource_id=actor_id,
                resource_name=full_name,
            )

        return Return.ok(LogoutResponse(status="logged_out", message="Signed out"))
