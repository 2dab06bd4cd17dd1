"""
Authorization Gate

Answers allow/deny for (principal, module, action) by resolving the
principal's roles to their permissions. Every use case asks the gate before
touching the store.
"""

import logging
from typing import FrozenSet, Iterable, Tuple
from uuid import UUID

from mall_access.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

PermissionPair = Tuple[str, str]


class AuthorizationGate:
    """
    Role-based permission check.

    Business Rules:
    - Effective permissions = union of the active permissions of every
      role assigned to the user
    - Exact (module, action) match only: no wildcards, no implied actions
    - Deny by default: any lookup failure answers False
    - Read-only, never writes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_permission_pairs(self, user_id: UUID) -> FrozenSet[PermissionPair]:
        """Effective (module, action) pairs of a user. Raises on store failure."""
        roles = await self.uow.roles.get_for_user(user_id)
        if not roles:
            return frozenset()

        permissions = await self.uow.permissions.get_for_roles([r.id for r in roles])
        return frozenset(p.pair for p in permissions if p.is_active)

    async def check_permission(self, user_id: UUID, module: str, action: str) -> bool:
        try:
            pairs = await self.get_permission_pairs(user_id)
        except Exception:
            logger.exception(
                f"Permission lookup failed for user {user_id} ({module}:{action}), denying"
            )
            return False

        return (module, action) in pairs

    async def has_any_permission(
        self, user_id: UUID, required: Iterable[PermissionPair]
    ) -> bool:
        """True when the user holds at least one of required"""
        try:
            pairs = await self.get_permission_pairs(user_id)
        except Exception:
            logger.exception(f"Permission lookup failed for user {user_id}, denying")
            return False

        return any(pair in pairs for pair in required)

    async def has_all_permissions(
        self, user_id: UUID, required: Iterable[PermissionPair]
    ) -> bool:
        """True when the user holds every pair in required"""
        try:
            pairs = await self.get_permission_pairs(user_id)
        except Exception:
            logger.exception(f"Permission lookup failed for user {user_id}, denying")
            return False

        return all(pair in pairs for pair in required)
