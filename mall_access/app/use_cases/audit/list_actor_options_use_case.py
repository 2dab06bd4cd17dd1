"""
List Actor Options Use Case

Users offered in the activity screen's actor filter.
"""

from typing import List
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ACTIVITY_LOGS, VIEW
from .dtos import ActorOption


class ListActorOptionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load users")
    async def execute(self, actor_id: UUID) -> Result[List[ActorOption]]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ACTIVITY_LOGS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view activity logs")
                )

            users = await self.uow.users.list_all_by_name()
            return Return.ok(
                [
                    ActorOption(id=str(u.id), full_name=u.full_name, email=u.email)
                    for u in users
                ]
            )
