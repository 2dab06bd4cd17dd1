from typing import List, Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.app.repositories.role_permission_repository import (
    IRolePermissionRepository,
)
from mall_access.domain.entities import AdminRolePermission


class RolePermissionRepository(IRolePermissionRepository):
    """AdminRolePermission repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_permission_ids_for_role(self, role_id: UUID) -> List[UUID]:
        stmt = select(AdminRolePermission.permission_id).where(
            AdminRolePermission.role_id == role_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def replace_for_role(
        self, role_id: UUID, permission_ids: Sequence[UUID]
    ) -> None:
        await self.session.execute(
            delete(AdminRolePermission).where(AdminRolePermission.role_id == role_id)
        )
        for permission_id in dict.fromkeys(permission_ids):
            self.session.add(
                AdminRolePermission(role_id=role_id, permission_id=permission_id)
            )
        await self.session.flush()

    async def delete_for_role(self, role_id: UUID) -> None:
        await self.session.execute(
            delete(AdminRolePermission).where(AdminRolePermission.role_id == role_id)
        )
        await self.session.flush()
