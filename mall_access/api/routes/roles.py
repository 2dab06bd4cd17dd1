from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from mall_access.api.utils.errors import raise_for_error
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.roles import (
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetRoleUseCase,
    ListRolesUseCase,
    ListUsersWithRoleUseCase,
    UpdateRoleUseCase,
)
from mall_access.app.use_cases.roles.dtos import (
    DeleteRoleResponse,
    RoleDetailResponse,
    RoleMemberResponse,
    RoleResponse,
)
from mall_access.depends import get_current_principal, get_unit_of_work

router = APIRouter(prefix="/roles", tags=["Roles"])


class CreateRoleRequest(BaseModel):
    """POST /roles request payload"""

    name: str
    display_name: str
    description: Optional[str] = None
    color: Optional[str] = None
    is_active: bool = True
    permission_ids: List[UUID] = []


class UpdateRoleRequest(BaseModel):
    """PUT /roles/{role_id} request payload; omitted fields are left unchanged"""

    name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None
    permission_ids: Optional[List[UUID]] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[RoleResponse])
async def list_roles(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListRolesUseCase(uow)
    result = await use_case.execute(principal.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RoleResponse)
async def create_role(
    request: CreateRoleRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Role

    Raises:
        - 403 Forbidden: Missing admin_roles:create
        - 404 Not Found: Unknown permission id
        - 409 Conflict: Role name already taken
        - 422 Unprocessable Entity: Invalid fields
    """
    use_case = CreateRoleUseCase(uow)
    result = await use_case.execute(
        principal.user_id,
        request.name,
        request.display_name,
        description=request.description,
        color=request.color,
        is_active=request.is_active,
        permission_ids=request.permission_ids,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{role_id}", status_code=status.HTTP_200_OK, response_model=RoleDetailResponse
)
async def get_role(
    role_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetRoleUseCase(uow)
    result = await use_case.execute(principal.user_id, role_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{role_id}", status_code=status.HTTP_200_OK, response_model=RoleResponse)
async def update_role(
    role_id: UUID,
    request: UpdateRoleRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateRoleUseCase(uow)
    result = await use_case.execute(
        principal.user_id,
        role_id,
        name=request.name,
        display_name=request.display_name,
        description=request.description,
        color=request.color,
        is_active=request.is_active,
        permission_ids=request.permission_ids,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{role_id}", status_code=status.HTTP_200_OK, response_model=DeleteRoleResponse
)
async def delete_role(
    role_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Role

    Raises:
        - 403 Forbidden: Missing admin_roles:delete
        - 404 Not Found: Unknown role
        - 409 Conflict: Role still assigned to users
    """
    use_case = DeleteRoleUseCase(uow)
    result = await use_case.execute(principal.user_id, role_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{role_id}/users",
    status_code=status.HTTP_200_OK,
    response_model=List[RoleMemberResponse],
)
async def list_role_users(
    role_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListUsersWithRoleUseCase(uow)
    result = await use_case.execute(principal.user_id, role_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
