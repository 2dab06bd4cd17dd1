import logging
from typing import Optional
from uuid import UUID

from mall_access.api.utils.jwt import verify_jwt
from mall_access.app.services.principal_provider import Principal, PrincipalProvider
from mall_access.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class JwtPrincipalProvider(PrincipalProvider):
    """
    Resolves the principal from a bearer JWT.

    The token alone is not enough: the user must still exist and be active,
    so deleting or deactivating an account cuts off its open sessions.
    """

    def __init__(self, token: str, uow: UnitOfWork):
        self.token = token
        self.uow = uow

    async def resolve(self) -> Optional[Principal]:
        payload = verify_jwt(self.token)
        if payload is None:
            return None

        try:
            user_id = UUID(payload["user_id"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Token without a valid user_id claim")
            return None

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active:
                return None

            return Principal(user_id=user.id, email=user.email, full_name=user.full_name)
