from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.app.repositories.role_repository import IRoleRepository
from mall_access.domain.entities import AdminRole, AdminUserRole


class RoleRepository(IRoleRepository):
    """AdminRole repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: UUID) -> Optional[AdminRole]:
        """Get role by ID"""
        stmt = select(AdminRole).where(AdminRole.id == role_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, role_ids: Sequence[UUID]) -> List[AdminRole]:
        if not role_ids:
            return []
        stmt = select(AdminRole).where(col(AdminRole.id).in_(list(role_ids)))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_name(self, name: str) -> Optional[AdminRole]:
        """Case-insensitive lookup by machine name"""
        stmt = select(AdminRole).where(func.lower(AdminRole.name) == name.lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def get_max_sort_order(self) -> int:
        stmt = select(func.max(AdminRole.sort_order))
        result = await self.session.exec(stmt)
        return result.one() or 0

    async def list_all(self) -> List[AdminRole]:
        stmt = select(AdminRole).order_by(col(AdminRole.sort_order), col(AdminRole.name))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_for_user(self, user_id: UUID) -> List[AdminRole]:
        """Roles assigned to a user, by sort_order"""
        stmt = (
            select(AdminRole)
            .join(AdminUserRole, AdminUserRole.role_id == AdminRole.id)
            .where(AdminUserRole.user_id == user_id)
            .order_by(col(AdminRole.sort_order))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, role: AdminRole) -> AdminRole:
        """Create a new role"""
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def update(self, role: AdminRole) -> AdminRole:
        """Update existing role"""
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def delete(self, role: AdminRole) -> None:
        await self.session.delete(role)
        await self.session.flush()
