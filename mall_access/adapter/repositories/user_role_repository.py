from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from mall_access.app.repositories.user_role_repository import IUserRoleRepository
from mall_access.domain.base import utcnow
from mall_access.domain.entities import AdminUserRole


class UserRoleRepository(IUserRoleRepository):
    """AdminUserRole repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_role_ids_for_user(self, user_id: UUID) -> List[UUID]:
        stmt = select(AdminUserRole.role_id).where(AdminUserRole.user_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_role_ids_for_users(
        self, user_ids: Sequence[UUID]
    ) -> Dict[UUID, List[UUID]]:
        if not user_ids:
            return {}
        stmt = select(AdminUserRole.user_id, AdminUserRole.role_id).where(
            col(AdminUserRole.user_id).in_(list(user_ids))
        )
        result = await self.session.exec(stmt)
        grants: Dict[UUID, List[UUID]] = defaultdict(list)
        for user_id, role_id in result.all():
            grants[user_id].append(role_id)
        return dict(grants)

    async def get_user_ids_for_role(self, role_id: UUID) -> List[UUID]:
        stmt = select(AdminUserRole.user_id).where(AdminUserRole.role_id == role_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def replace_for_user(
        self, user_id: UUID, role_ids: Sequence[UUID], assigned_by: Optional[UUID]
    ) -> None:
        await self.session.execute(
            delete(AdminUserRole).where(AdminUserRole.user_id == user_id)
        )
        assigned_at = utcnow()
        for role_id in dict.fromkeys(role_ids):
            self.session.add(
                AdminUserRole(
                    user_id=user_id,
                    role_id=role_id,
                    assigned_by=assigned_by,
                    assigned_at=assigned_at,
                )
            )
        await self.session.flush()

    async def delete_for_user(self, user_id: UUID) -> None:
        await self.session.execute(
            delete(AdminUserRole).where(AdminUserRole.user_id == user_id)
        )
        await self.session.flush()
