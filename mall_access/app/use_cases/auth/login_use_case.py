"""
Login Use Case

Authenticates an administrator by email and password and issues a JWT.
"""

from config import ApplicationConfig
from mall_access.libs.result import Error, Result, Return
from mall_access.api.utils.jwt import generate_jwt
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.passwords import burn_password_check, verify_password
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.app.use_cases.users.validation import normalize_email
from mall_access.app.use_cases.users.views import build_user_response
from mall_access.domain.base import utcnow
from mall_access.domain.entities import ActivityAction, ActivityModule
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for admin login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Same error for unknown email and wrong password
    - User must be active
    - Updates user.last_login_at
    - Records a login activity entry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to sign in")
    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            # Always perform a hash check even if the user is unknown
            if user is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_active:
                return Return.err(Error("USER_DISABLED", "User account is disabled"))

            user.last_login_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            await self.activity.record(
                user.id,
                ActivityAction.login.value,
                ActivityModule.auth.value,
                resource_type="admin_user",
                resource_id=user.id,
                resource_name=user.full_name,
            )

            access_token = generate_jwt(user.id, user.email)

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    token_type="bearer",
                    expires_in=ApplicationConfig.JWT_EXPIRE_MINUTES * 60,
                    user=await build_user_response(self.uow, user),
                )
            )
