from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from mall_access.domain.entities import AdminPermission


class IPermissionRepository(ABC):
    """AdminPermission repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, permission_id: UUID) -> Optional[AdminPermission]:
        """Get permission by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, permission_ids: Sequence[UUID]) -> List[AdminPermission]:
        """Get all permissions whose id is in permission_ids"""
        pass

    @abstractmethod
    async def get_active_by_pair(
        self, module: str, action: str
    ) -> Optional[AdminPermission]:
        """Get the active permission for (module, action), if any"""
        pass

    @abstractmethod
    async def list_all(self, include_inactive: bool = False) -> List[AdminPermission]:
        """Permissions ordered by module, then action"""
        pass

    @abstractmethod
    async def get_for_roles(self, role_ids: Sequence[UUID]) -> List[AdminPermission]:
        """Permissions linked to any of role_ids, active or not"""
        pass

    @abstractmethod
    async def create(self, permission: AdminPermission) -> AdminPermission:
        """Create a new permission"""
        pass

    @abstractmethod
    async def update(self, permission: AdminPermission) -> AdminPermission:
        """Update existing permission"""
        pass
