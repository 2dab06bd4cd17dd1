"""
Get My Access Use Case

Lets the dashboard decide which navigation items to show.
"""

from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.users.dtos import UserRoleInfo
from mall_access.domain.permission_catalog import permission_name
from .dtos import MyAccessResponse


class GetMyAccessUseCase:
    """
    Roles and effective permissions of the current principal.

    Business Rules:
    - Self-service: needs no permission
    - Permission names ("module.action") sorted, inactive permissions excluded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load access")
    async def execute(self, actor_id: UUID) -> Result[MyAccessResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(actor_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            roles = await self.uow.roles.get_for_user(user.id)
            pairs = await self.gate.get_permission_pairs(user.id)

            return Return.ok(
                MyAccessResponse(
                    user_id=str(user.id),
                    email=user.email,
                    full_name=user.full_name,
                    roles=[UserRoleInfo.from_entity(r) for r in roles],
                    permissions=sorted(permission_name(m, a) for m, a in pairs),
                )
            )
