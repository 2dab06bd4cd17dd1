from abc import ABC, abstractmethod

from mall_access.app.repositories.activity_log_repository import IActivityLogRepository
from mall_access.app.repositories.admin_user_repository import IAdminUserRepository
from mall_access.app.repositories.permission_repository import IPermissionRepository
from mall_access.app.repositories.role_permission_repository import IRolePermissionRepository
from mall_access.app.repositories.role_repository import IRoleRepository
from mall_access.app.repositories.user_role_repository import IUserRoleRepository


class StoreError(Exception):
    """The data store failed; raised by UnitOfWork implementations."""


class UnitOfWork(ABC):
    """
    Abstract UnitOfWork - defines repository access and transaction management

    Everything done between entering the block and commit() is one
    transaction. Leaving the block rolls back whatever was not committed,
    and store failures escaping the block surface as StoreError.
    """

    # Repository properties (initialized in __aenter__)
    users: IAdminUserRepository
    roles: IRoleRepository
    permissions: IPermissionRepository
    user_roles: IUserRoleRepository
    role_permissions: IRolePermissionRepository
    activity_logs: IActivityLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
