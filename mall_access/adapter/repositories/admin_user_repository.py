from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.app.repositories.admin_user_repository import IAdminUserRepository
from mall_access.domain.entities import AdminUser, AdminUserRole


class AdminUserRepository(IAdminUserRepository):
    """AdminUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[AdminUser]:
        """Get user by ID"""
        stmt = select(AdminUser).where(AdminUser.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[AdminUser]:
        """Get user by email address"""
        stmt = select(AdminUser).where(AdminUser.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: Sequence[UUID]) -> List[AdminUser]:
        if not user_ids:
            return []
        stmt = select(AdminUser).where(col(AdminUser.id).in_(list(user_ids)))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: AdminUser) -> AdminUser:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: AdminUser) -> AdminUser:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: AdminUser) -> None:
        await self.session.delete(user)
        await self.session.flush()

    async def list_paginated(
        self,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
        role_id: Optional[UUID] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[AdminUser], int]:
        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(col(AdminUser.full_name).ilike(pattern), col(AdminUser.email).ilike(pattern))
            )
        if is_active is not None:
            conditions.append(AdminUser.is_active == is_active)
        if role_id is not None:
            holders = select(AdminUserRole.user_id).where(AdminUserRole.role_id == role_id)
            conditions.append(col(AdminUser.id).in_(holders))

        count_stmt = select(func.count()).select_from(AdminUser).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(AdminUser)
            .where(*conditions)
            .order_by(col(AdminUser.created_at).desc(), col(AdminUser.id).desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all()), total

    async def list_all_by_name(self) -> List[AdminUser]:
        stmt = select(AdminUser).order_by(col(AdminUser.full_name))
        result = await self.session.exec(stmt)
        return list(result.all())
