"""
List Activity Use Case

Filtered, paginated activity log for the audit screen.
"""

import math
from datetime import date
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from mall_access.libs.result import Error, Result, Return
from mall_access.app.repositories.activity_log_repository import ActivityLogQuery
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.permission_catalog import ACTIVITY_LOGS, VIEW
from .dtos import ActivityListResponse
from .views import build_entry_responses

ALL = "all"


def _filter_value(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or value == ALL:
        return None
    return value


class ListActivityUseCase:
    """
    Use case for listing activity entries.

    Business Rules:
    - Requires activity_logs:view
    - search matches resource name, module or action, case-insensitive
    - "all" for action or module means no filter
    - Date range is inclusive on calendar days
    - Ordered newest first, ties broken by id, so pages at a fixed
      per_page cover every entry exactly once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.gate = AuthorizationGate(uow)

    @handle_store_errors("Failed to load activity")
    async def execute(
        self,
        actor_id: UUID,
        search: Optional[str] = None,
        action: Optional[str] = None,
        module: Optional[str] = None,
        filter_actor_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        page: int = 1,
        per_page: int = ApplicationConfig.DEFAULT_PER_PAGE,
    ) -> Result[ActivityListResponse]:
        """
        Execute list activity use case.

        Args:
            actor_id: Principal asking
            search: Free text
            action: Action filter
            module: Module filter
            filter_actor_id: Only entries written by this actor
            start_date: First day included
            end_date: Last day included
            page: 1-based page number
            per_page: Page size

        Returns:
            Result with ActivityListResponse, or Error
        """
        if page < 1 or not 1 <= per_page <= ApplicationConfig.MAX_PER_PAGE:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"page must be >= 1 and per_page between 1 and {ApplicationConfig.MAX_PER_PAGE}",
                )
            )
        if start_date and end_date and start_date > end_date:
            return Return.err(
                Error("VALIDATION_ERROR", "start_date must not be after end_date")
            )

        async with self.uow:
            if not await self.gate.check_permission(actor_id, ACTIVITY_LOGS, VIEW):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to view activity logs")
                )

            query = ActivityLogQuery(
                search=_filter_value(search),
                action=_filter_value(action),
                module=_filter_value(module),
                actor_id=_filter_value(filter_actor_id),
                start_date=start_date,
                end_date=end_date,
                offset=(page - 1) * per_page,
                limit=per_page,
            )
            entries, total = await self.uow.activity_logs.list_paginated(query)

            return Return.ok(
                ActivityListResponse(
                    items=await build_entry_responses(self.uow, entries),
                    total=total,
                    page=page,
                    per_page=per_page,
                    total_pages=math.ceil(total / per_page),
                )
            )
