from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from mall_access.domain.entities import AdminRole


class IRoleRepository(ABC):
    """AdminRole repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, role_id: UUID) -> Optional[AdminRole]:
        """Get role by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, role_ids: Sequence[UUID]) -> List[AdminRole]:
        """Get all roles whose id is in role_ids"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[AdminRole]:
        """Get role by system name, compared case-insensitively"""
        pass

    @abstractmethod
    async def get_max_sort_order(self) -> int:
        """Highest sort_order in use, 0 when there are no roles"""
        pass

    @abstractmethod
    async def list_all(self) -> List[AdminRole]:
        """All roles ordered by sort_order ascending"""
        pass

    @abstractmethod
    async def get_for_user(self, user_id: UUID) -> List[AdminRole]:
        """Roles currently assigned to a user, ordered by sort_order"""
        pass

    @abstractmethod
    async def create(self, role: AdminRole) -> AdminRole:
        """Create a new role"""
        pass

    @abstractmethod
    async def update(self, role: AdminRole) -> AdminRole:
        """Update existing role"""
        pass

    @abstractmethod
    async def delete(self, role: AdminRole) -> None:
        """Delete role row (permission links must be removed first)"""
        pass
