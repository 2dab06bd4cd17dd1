"""
Get User Use Case
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ADMIN_USERS, VIEW
from .dtos import UserResponse
from .views import build_user_response


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load user")
    async def execute(self, actor_id: UUID, user_id: UUID) -> Result[UserResponse]:
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view users")
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(await build_user_response(self.uow, user))
