import logging

from mall_access.app.services.invitation_notifier import InvitationNotifier

logger = logging.getLogger(__name__)


class LoggingInvitationNotifier(InvitationNotifier):
    """Records invitations in the operational log; credentials are never logged"""

    async def send_invitation(
        self, email: str, full_name: str, temporary_password: str
    ) -> None:
        logger.info(f"Invitation issued for {full_name} <{email}>")
