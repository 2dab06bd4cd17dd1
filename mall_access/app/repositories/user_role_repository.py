from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID


class IUserRoleRepository(ABC):
    """AdminUserRole (join) repository interface - application layer"""

    @abstractmethod
    async def get_role_ids_for_user(self, user_id: UUID) -> List[UUID]:
        """Role ids currently assigned to a user"""
        pass

    @abstractmethod
    async def get_role_ids_for_users(
        self, user_ids: Sequence[UUID]
    ) -> Dict[UUID, List[UUID]]:
        """Role ids per user for a batch of users"""
        pass

    @abstractmethod
    async def get_user_ids_for_role(self, role_id: UUID) -> List[UUID]:
        """Users currently holding a role"""
        pass

    @abstractmethod
    async def replace_for_user(
        self, user_id: UUID, role_ids: Sequence[UUID], assigned_by: Optional[UUID]
    ) -> None:
        """
        Replace all grants of a user.

        Deletes every existing row for the user, then inserts one row per
        distinct role id. Runs in the caller's transaction.
        """
        pass

    @abstractmethod
    async def delete_for_user(self, user_id: UUID) -> None:
        """Remove every grant of a user"""
        pass
