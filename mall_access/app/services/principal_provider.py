from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class Principal(BaseModel):
    """Authenticated identity making a request"""

    user_id: UUID
    email: str
    full_name: str


class PrincipalProvider(ABC):
    """Resolves the current principal; None means unauthenticated"""

    @abstractmethod
    async def resolve(self) -> Optional[Principal]:
        pass
