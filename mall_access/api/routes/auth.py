from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from mall_access.api.utils.errors import raise_for_error
from mall_access.app.services.principal_provider import Principal
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.auth import LoginUseCase, LogoutUseCase
from mall_access.app.use_cases.auth.dtos import LoginResponse, LogoutResponse
from mall_access.depends import get_current_principal, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """POST /auth/login request payload"""

    email: str
    password: str


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Admin Login

    Raises:
        - 401 Unauthorized: Unknown email or wrong password
        - 403 Forbidden: Account is disabled
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(principal.user_id, principal.full_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
