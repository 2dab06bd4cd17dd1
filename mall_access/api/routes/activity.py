from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from mall_access.api.utils.errors import raise_for_error
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.audit import (
    AggregateByDayUseCase,
    AggregateByModuleUseCase,
    GetActivityUseCase,
    ListActivityUseCase,
    ListActorOptionsUseCase,
    RecentActivityUseCase,
)
from mall_access.app.use_cases.audit.dtos import (
    ActivityEntryResponse,
    ActivityListResponse,
    ActorOption,
    DayCount,
    ModuleCount,
)
from mall_access.depends import get_current_principal, get_unit_of_work

router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ActivityListResponse)
async def list_activity(
    search: Optional[str] = None,
    action: Optional[str] = None,
    module: Optional[str] = None,
    actor_id: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PER_PAGE, ge=1, le=ApplicationConfig.MAX_PER_PAGE
    ),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Activity Log

    Newest first. action/module accept "all" for no filter; the date range
    is inclusive on calendar days.
    """
    use_case = ListActivityUseCase(uow)
    result = await use_case.execute(
        principal.user_id,
        search=search,
        action=action,
        module=module,
        filter_actor_id=actor_id,
        start_date=start_date,
        end_date=end_date,
        page=page,
        per_page=per_page,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/stats/modules", status_code=status.HTTP_200_OK, response_model=List[ModuleCount]
)
async def activity_by_module(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AggregateByModuleUseCase(uow)
    result = await use_case.execute(principal.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/stats/days", status_code=status.HTTP_200_OK, response_model=List[DayCount])
async def activity_by_day(
    days: int = Query(ApplicationConfig.ACTIVITY_CHART_DAYS, ge=0, le=366),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AggregateByDayUseCase(uow)
    result = await use_case.execute(principal.user_id, last_n_days=days)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/recent",
    status_code=status.HTTP_200_OK,
    response_model=List[ActivityEntryResponse],
)
async def recent_activity(
    limit: int = Query(10, ge=1, le=50),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = RecentActivityUseCase(uow)
    result = await use_case.execute(principal.user_id, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/actors", status_code=status.HTTP_200_OK, response_model=List[ActorOption])
async def activity_actors(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListActorOptionsUseCase(uow)
    result = await use_case.execute(principal.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{entry_id}", status_code=status.HTTP_200_OK, response_model=ActivityEntryResponse
)
async def get_activity(
    entry_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetActivityUseCase(uow)
    result = await use_case.execute(principal.user_id, entry_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
