from abc import ABC, abstractmethod


class InvitationNotifier(ABC):
    """Delivers a new user's temporary credential out of band"""

    @abstractmethod
    async def send_invitation(
        self, email: str, full_name: str, temporary_password: str
    ) -> None:
        pass
