from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.adapter.repositories.activity_log_repository import ActivityLogRepository
from mall_access.adapter.repositories.admin_user_repository import AdminUserRepository
from mall_access.adapter.repositories.permission_repository import PermissionRepository
from mall_access.adapter.repositories.role_permission_repository import (
    RolePermissionRepository,
)
from mall_access.adapter.repositories.role_repository import RoleRepository
from mall_access.adapter.repositories.user_role_repository import UserRoleRepository
from mall_access.app.services.unit_of_work import StoreError, UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = AdminUserRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.permissions = PermissionRepository(self.session)
        self.user_roles = UserRoleRepository(self.session)
        self.role_permissions = RolePermissionRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.rollback()
        if isinstance(exc, SQLAlchemyError):
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
