from abc import ABC, abstractmethod
from typing import List, Sequence
from uuid import UUID


class IRolePermissionRepository(ABC):
    """AdminRolePermission (join) repository interface - application layer"""

    @abstractmethod
    async def get_permission_ids_for_role(self, role_id: UUID) -> List[UUID]:
        """Permission ids linked to a role"""
        pass

    @abstractmethod
    async def replace_for_role(
        self, role_id: UUID, permission_ids: Sequence[UUID]
    ) -> None:
        """
        Replace the permission set of a role.

        Deletes every existing link for the role, then inserts one row per
        distinct permission id. Runs in the caller's transaction.
        """
        pass

    @abstractmethod
    async def delete_for_role(self, role_id: UUID) -> None:
        """Remove every permission link of a role"""
        pass
