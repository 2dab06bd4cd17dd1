from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from mall_access.adapter.services.jwt_principal_provider import JwtPrincipalProvider
from mall_access.adapter.services.logging_invitation_notifier import LoggingInvitationNotifier
from mall_access.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from mall_access.api.error import ClientError, ServerError
from mall_access.app.services.invitation_notifier import InvitationNotifier
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import StoreError, UnitOfWork
from mall_access.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_invitation_notifier() -> InvitationNotifier:
    return LoggingInvitationNotifier()


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Principal:
    """
    Dependency resolving the signed-in admin from the Authorization header.

    Raises:
        ClientError: 401 if the token is missing, invalid, expired, or
            belongs to a deleted or inactive user
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        principal = await JwtPrincipalProvider(credentials.credentials, uow).resolve()
    except StoreError:
        raise ServerError(Error("STORE_ERROR", "Failed to resolve principal"))

    if principal is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return principal
