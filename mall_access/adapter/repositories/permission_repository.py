from typing import List, Optional, Sequence
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.app.repositories.permission_repository import IPermissionRepository
from mall_access.domain.entities import AdminPermission, AdminRolePermission


class PermissionRepository(IPermissionRepository):
    """AdminPermission repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, permission_id: UUID) -> Optional[AdminPermission]:
        """Get permission by ID"""
        stmt = select(AdminPermission).where(AdminPermission.id == permission_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, permission_ids: Sequence[UUID]) -> List[AdminPermission]:
        if not permission_ids:
            return []
        stmt = select(AdminPermission).where(
            col(AdminPermission.id).in_(list(permission_ids))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_pair(
        self, module: str, action: str
    ) -> Optional[AdminPermission]:
        stmt = select(AdminPermission).where(
            AdminPermission.module == module,
            AdminPermission.action == action,
            AdminPermission.is_active == True,  # noqa: E712
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self, include_inactive: bool = False) -> List[AdminPermission]:
        stmt = select(AdminPermission)
        if not include_inactive:
            stmt = stmt.where(AdminPermission.is_active == True)  # noqa: E712
        stmt = stmt.order_by(col(AdminPermission.module), col(AdminPermission.action))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_for_roles(self, role_ids: Sequence[UUID]) -> List[AdminPermission]:
        """Permissions granted to any of the roles, active or not"""
        if not role_ids:
            return []
        stmt = (
            select(AdminPermission)
            .join(
                AdminRolePermission,
                AdminRolePermission.permission_id == AdminPermission.id,
            )
            .where(col(AdminRolePermission.role_id).in_(list(role_ids)))
            .distinct()
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, permission: AdminPermission) -> AdminPermission:
        """Create a new permission"""
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def update(self, permission: AdminPermission) -> AdminPermission:
        """Update existing permission"""
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission
