from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr

from config import ApplicationConfig
from mall_access.api.utils.errors import raise_for_error
from mall_access.app.services.invitation_notifier import InvitationNotifier
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ResetUserPasswordUseCase,
    SetUserRolesUseCase,
    ToggleUserStatusUseCase,
    UpdateUserUseCase,
)
from mall_access.app.use_cases.users.dtos import (
    CreateUserResponse,
    UserListResponse,
    UserResponse,
    UserStatusResponse,
)
from mall_access.depends import (
    get_current_principal,
    get_invitation_notifier,
    get_unit_of_work,
)
from mall_access.domain.entities import UserStatusFilter

router = APIRouter(prefix="/users", tags=["Users"])


class CreateUserRequest(BaseModel):
    """POST /users request payload"""

    email: EmailStr
    full_name: str
    role_ids: List[UUID]
    send_invitation: bool = False


class UpdateUserRequest(BaseModel):
    """PUT /users/{user_id} request payload; omitted fields are left unchanged"""

    email: Optional[EmailStr] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: Optional[bool] = None
    role_ids: Optional[List[UUID]] = None


class SetRolesRequest(BaseModel):
    """PUT /users/{user_id}/roles request payload"""

    role_ids: List[UUID]


class SetStatusRequest(BaseModel):
    """PATCH /users/{user_id}/status request payload"""

    is_active: bool


class ResetPasswordRequest(BaseModel):
    """POST /users/{user_id}/password request payload"""

    new_password: str


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    search: Optional[str] = None,
    status_filter: UserStatusFilter = Query(UserStatusFilter.all, alias="status"),
    role_id: Optional[UUID] = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(
        ApplicationConfig.DEFAULT_PER_PAGE, ge=1, le=ApplicationConfig.MAX_PER_PAGE
    ),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListUsersUseCase(uow)
    result = await use_case.execute(
        principal.user_id,
        search=search,
        status=status_filter.value,
        role_id=role_id,
        page=page,
        per_page=per_page,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateUserResponse)
async def create_user(
    request: CreateUserRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: InvitationNotifier = Depends(get_invitation_notifier),
):
    """
    Create Admin User

    Returns the temporary password unless an invitation was requested.

    Raises:
        - 403 Forbidden: Missing admin_users:create
        - 404 Not Found: Unknown role
        - 409 Conflict: Email already in use
        - 422 Unprocessable Entity: Invalid fields or no role
    """
    use_case = CreateUserUseCase(uow, notifier)
    result = await use_case.execute(
        principal.user_id,
        request.email,
        request.full_name,
        request.role_ids,
        send_invitation=request.send_invitation,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(
    user_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetUserUseCase(uow)
    result = await use_case.execute(principal.user_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateUserUseCase(uow)
    result = await use_case.execute(
        principal.user_id,
        user_id,
        email=request.email,
        full_name=request.full_name,
        avatar_url=request.avatar_url,
        is_active=request.is_active,
        role_ids=request.role_ids,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def delete_user(
    user_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Admin User

    Raises:
        - 403 Forbidden: Missing admin_users:delete
        - 404 Not Found: Unknown user
        - 409 Conflict: Deleting your own account
    """
    use_case = DeleteUserUseCase(uow)
    result = await use_case.execute(principal.user_id, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{user_id}/roles", status_code=status.HTTP_200_OK, response_model=UserResponse
)
async def set_user_roles(
    user_id: UUID,
    request: SetRolesRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Replace every role of a user"""
    use_case = SetUserRolesUseCase(uow)
    result = await use_case.execute(principal.user_id, user_id, request.role_ids)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{user_id}/status", status_code=status.HTTP_200_OK, response_model=UserResponse
)
async def set_user_status(
    user_id: UUID,
    request: SetStatusRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ToggleUserStatusUseCase(uow)
    result = await use_case.execute(principal.user_id, user_id, request.is_active)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{user_id}/password",
    status_code=status.HTTP_200_OK,
    response_model=UserStatusResponse,
)
async def reset_user_password(
    user_id: UUID,
    request: ResetPasswordRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ResetUserPasswordUseCase(uow)
    result = await use_case.execute(principal.user_id, user_id, request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
