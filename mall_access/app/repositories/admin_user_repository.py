from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from mall_access.domain.entities import AdminUser


class IAdminUserRepository(ABC):
    """AdminUser repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[AdminUser]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AdminUser]:
        """Get user by normalized (lowercased) email"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: Sequence[UUID]) -> List[AdminUser]:
        """Get all users whose id is in user_ids"""
        pass

    @abstractmethod
    async def create(self, user: AdminUser) -> AdminUser:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: AdminUser) -> AdminUser:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: AdminUser) -> None:
        """Delete user row (role grants must be removed first)"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
        role_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[AdminUser], int]:
        """
        List users newest first.

        Returns:
            Tuple of (users page, total matching count)
        """
        pass

    @abstractmethod
    async def list_all_by_name(self) -> List[AdminUser]:
        """All users ordered by full_name"""
        pass
