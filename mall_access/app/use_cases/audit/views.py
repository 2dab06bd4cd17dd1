from typing import Dict, List, Sequence
from uuid import UUID

from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityLog, AdminUser
from .dtos import ActivityEntryResponse


def _as_user_id(actor_id: str):
    # "system" and other non-user actors carry no UUID
    try:
        return UUID(actor_id)
    except ValueError:
        return None


async def build_entry_responses(
    uow: UnitOfWork, entries: Sequence[ActivityLog]
) -> List[ActivityEntryResponse]:
    """Join entries with their actors using one user lookup."""
    user_ids = list(
        dict.fromkeys(
            uid for uid in (_as_user_id(e.actor_id) for e in entries) if uid is not None
        )
    )
    actors: Dict[UUID, AdminUser] = {}
    if user_ids:
        actors = {u.id: u for u in await uow.users.get_by_ids(user_ids)}

    return [
        ActivityEntryResponse.from_entity(e, actors.get(_as_user_id(e.actor_id)))
        for e in entries
    ]
