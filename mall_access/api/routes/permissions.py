from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from mall_access.api.utils.errors import raise_for_error
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.permissions import (
    CreatePermissionUseCase,
    ListPermissionsUseCase,
    SetPermissionStatusUseCase,
)
from mall_access.app.use_cases.permissions.dtos import PermissionResponse
from mall_access.depends import get_current_principal, get_unit_of_work

router = APIRouter(prefix="/permissions", tags=["Permissions"])


class CreatePermissionRequest(BaseModel):
    """POST /permissions request payload"""

    module: str
    action: str
    display_name: Optional[str] = None
    description: Optional[str] = None


class SetPermissionStatusRequest(BaseModel):
    """PATCH /permissions/{permission_id}/status request payload"""

    is_active: bool


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=List[PermissionResponse]
)
async def list_permissions(
    include_inactive: bool = False,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListPermissionsUseCase(uow)
    result = await use_case.execute(principal.user_id, include_inactive=include_inactive)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=PermissionResponse
)
async def create_permission(
    request: CreatePermissionRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = CreatePermissionUseCase(uow)
    result = await use_case.execute(
        principal.user_id,
        request.module,
        request.action,
        display_name=request.display_name,
        description=request.description,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{permission_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=PermissionResponse,
)
async def set_permission_status(
    permission_id: UUID,
    request: SetPermissionStatusRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = SetPermissionStatusUseCase(uow)
    result = await use_case.execute(principal.user_id, permission_id, request.is_active)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
