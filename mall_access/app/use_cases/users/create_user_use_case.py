"""
Create User Use Case

Invites a new administrator: creates the account with a temporary
credential and assigns its initial roles.
"""

import logging
from typing import List, Optional
from uuid import UUID

from mall_access.libs.result import Error, Result, Return
from mall_access.app.services.activity_logger import ActivityLogger
from mall_access.app.services.authorization import AuthorizationGate
from mall_access.app.services.invitation_notifier import InvitationNotifier
from mall_access.app.services.passwords import generate_temp_password, hash_password
from mall_access.app.services.store_errors import handle_store_errors
from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityAction, ActivityModule, AdminUser
from mall_access.domain.permission_catalog import ADMIN_USERS, CREATE
from .dtos import CreateUserResponse
from .validation import (
    distinct_ids,
    email_violation,
    full_name_violation,
    normalize_email,
    user_snapshot,
)
from .views import build_user_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating an admin user.

    Business Rules:
    - Requires admin_users:create
    - Email normalized (trimmed, lowercased) and unique
    - At least one role is required; every role must exist
    - 12 character temporary password, stored as bcrypt hash only
    - User row and role grants are written in one transaction
    - With send_invitation the credential goes to the notifier and is not
      returned; otherwise it is returned once for the administrator
    - Notifier failures are logged, never surfaced
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[InvitationNotifier] = None):
        self.uow = uow
        self.notifier = notifier
        self.gate = AuthorizationGate(uow)
        self.activity = ActivityLogger(uow)

    @handle_store_errors("Failed to create user")
    async def execute(
        self,
        actor_id: UUID,
        email: str,
        full_name: str,
        role_ids: List[UUID],
        send_invitation: bool = False,
    ) -> Result[CreateUserResponse]:
        """
        Execute create user use case.

        Args:
            actor_id: Principal creating the user
            email: Login email
            full_name: Display name
            role_ids: Initial roles (at least one)
            send_invitation: Deliver the credential through the notifier

        Returns:
            Result with CreateUserResponse, or Error
        """
        async with self.uow:
            if not await self.gate.check_permission(actor_id, ADMIN_USERS, CREATE):
                return Return.err(
                    Error("FORBIDDEN", "You do not have permission to create users")
                )

            email = normalize_email(email)
            full_name = full_name.strip()
            violation = email_violation(email) or full_name_violation(full_name)
            if violation:
                return Return.err(Error("VALIDATION_ERROR", violation))

            role_ids = distinct_ids(role_ids)
            if not role_ids:
                return Return.err(
                    Error("VALIDATION_ERROR", "At least one role is required")
                )

            roles = await self.uow.roles.get_by_ids(role_ids)
            if len(roles) != len(role_ids):
                return Return.err(Error("ROLE_NOT_FOUND", "One or more roles not found"))

            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "A user with this email already exists")
                )

            temporary_password = generate_temp_password()

            user = AdminUser(
                email=email,
                full_name=full_name,
                password_hash=hash_password(temporary_password),
            )
            user = await self.uow.users.create(user)
            await self.uow.user_roles.replace_for_user(user.id, role_ids, actor_id)

            await self.uow.commit()

            await self.activity.record(
                actor_id,
                ActivityAction.create.value,
                ActivityModule.users.value,
                resource_type="admin_user",
                resource_id=user.id,
                resource_name=user.full_name,
                new_values=user_snapshot(user, role_ids),
                metadata={"send_invitation": send_invitation},
            )

            invitation_sent = False
            if send_invitation:
                invitation_sent = await self._send_invitation(user, temporary_password)

            response = CreateUserResponse(
                user=await build_user_response(self.uow, user),
                invitation_sent=invitation_sent,
                temporary_password=None if send_invitation else temporary_password,
            )
            return Return.ok(response)

    async def _send_invitation(self, user: AdminUser, temporary_password: str) -> bool:
        if self.notifier is None:
            logger.warning(f"No invitation notifier configured, {user.email} not notified")
            return False
        try:
            await self.notifier.send_invitation(
                user.email, user.full_name, temporary_password
            )
        except Exception:
            logger.exception(f"Failed to send invitation to {user.email}")
            return False
        return True
