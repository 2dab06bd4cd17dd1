from typing import List, Sequence

from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import AdminUser
from .dtos import UserResponse


async def build_user_responses(
    uow: UnitOfWork, users: Sequence[AdminUser]
) -> List[UserResponse]:
    """Attach role badges to users with one grant lookup and one role lookup."""
    if not users:
        return []

    role_ids_by_user = await uow.user_roles.get_role_ids_for_users([u.id for u in users])
    all_role_ids = list(
        dict.fromkeys(r for ids in role_ids_by_user.values() for r in ids)
    )
    roles = await uow.roles.get_by_ids(all_role_ids) if all_role_ids else []
    roles_by_id = {r.id: r for r in roles}

    responses = []
    for user in users:
        user_roles = [
            roles_by_id[r] for r in role_ids_by_user.get(user.id, []) if r in roles_by_id
        ]
        user_roles.sort(key=lambda r: r.sort_order)
        responses.append(UserResponse.from_entity(user, user_roles))
    return responses


async def build_user_response(uow: UnitOfWork, user: AdminUser) -> UserResponse:
    return (await build_user_responses(uow, [user]))[0]
