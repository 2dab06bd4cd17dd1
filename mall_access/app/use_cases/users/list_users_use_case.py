"""
List Users Use Case

Paginated, filterable listing of admin users.
"""

import math
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import UserStatusFilter
from mall_access.domain.permission_catalog import ADMIN_USERS, VIEW
from .dtos import UserListResponse
from .views import build_user_responses


class ListUsersUseCase:
    """
    Use case for listing admin users.

    Business Rules:
    - Requires admin_users:view
    - search matches name or email, case-insensitive
    - status: all / active / inactive
    - Newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load users")
    async def execute(
        self,
        actor_id: UUID,
        search: Optional[str] = None,
        status: str = UserStatusFilter.all.value,
        role_id: Optional[UUID] = None,
        page: int = 1,
        per_page: int = ApplicationConfig.DEFAULT_PER_PAGE,
    ) -> Result[UserListResponse]:
        try:
            status_filter = UserStatusFilter(status)
        except ValueError:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid status: {status}. Must be one of: all, active, inactive",
                )
            )
        if page < 1 or not 1 <= per_page <= ApplicationConfig.MAX_PER_PAGE:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"page must be >= 1 and per_page between 1 and {ApplicationConfig.MAX_PER_PAGE}",
                )
            )

        is_active = None
        if status_filter == UserStatusFilter.active:
            is_active = True
        elif status_filter == UserStatusFilter.inactive:
            is_active = False

        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view users")
                )

            users, total = await self.uow.users.list_paginated(
                search=(search or "").strip() or None,
                is_active=is_active,
                role_id=role_id,
                offset=(page - 1) * per_page,
                limit=per_page,
            )

            return Return.ok(
                UserListResponse(
                    items=await build_user_responses(self.uow, users),
                    total=total,
                    page=page,
                    per_page=per_page,
                    total_pages=math.ceil(total / per_page),
                )
            )
