from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from mall_access.api.utils.errors import raise_for_error
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.auth import GetMyAccessUseCase
from mall_access.app.use_cases.auth.dtos import MyAccessResponse
from mall_access.app.use_cases.users import ChangeOwnPasswordUseCase, UpdateOwnProfileUseCase
from mall_access.app.use_cases.users.dtos import UserResponse, UserStatusResponse
from mall_access.depends import get_current_principal, get_unit_of_work

router = APIRouter(prefix="/me", tags=["Me"])


class UpdateProfileRequest(BaseModel):
    """PUT /me/profile request payload"""

    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    """POST /me/password request payload"""

    current_password: str
    new_password: str


@router.get("/access", status_code=status.HTTP_200_OK, response_model=MyAccessResponse)
async def get_my_access(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Roles and effective permissions of the signed-in admin"""
    use_case = GetMyAccessUseCase(uow)
    result = await use_case.execute(principal.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_profile(
    request: UpdateProfileRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateOwnProfileUseCase(uow)
    result = await use_case.execute(
        principal.user_id, full_name=request.full_name, avatar_url=request.avatar_url
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/password", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def change_password(
    request: ChangePasswordRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ChangeOwnPasswordUseCase(uow)
    result = await use_case.execute(
        principal.user_id, request.current_password, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
