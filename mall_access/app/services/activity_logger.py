"""
Activity Logger

Best-effort writer for the append-only activity log.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union
from uuid import UUID

from pydantic_core import to_jsonable_python

from mall_access.app.services.unit_of_work import UnitOfWork
from mall_access.domain.entities import ActivityLog

logger = logging.getLogger(__name__)

Snapshot = Dict[str, Any]


def diff_values(old: Snapshot, new: Snapshot) -> Tuple[Snapshot, Snapshot]:
    """
    Reduce two snapshots to the keys whose value changed.

    Key order follows old, then keys only present in new.
    """
    keys = list(old) + [k for k in new if k not in old]
    changed = [k for k in keys if old.get(k) != new.get(k)]
    return (
        {k: old.get(k) for k in changed},
        {k: new.get(k) for k in changed},
    )


def _as_json(values: Optional[Snapshot]) -> Optional[dict]:
    if values is None:
        return None
    return to_jsonable_python(values)


class ActivityLogger:
    """
    Records who changed what.

    Business Rules:
    - Called only after the mutation has been committed
    - Writes and commits its own entry; the mutation stays authoritative
    - Never raises: failures are logged and the entry is dropped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        actor_id: Union[UUID, str],
        action: str,
        module: str,
        *,
        resource_type: Optional[str] = None,
        resource_id: Optional[Union[UUID, str]] = None,
        resource_name: Optional[str] = None,
        old_values: Optional[Snapshot] = None,
        new_values: Optional[Snapshot] = None,
        metadata: Optional[Snapshot] = None,
    ) -> Optional[ActivityLog]:
        try:
            entry = ActivityLog(
                actor_id=str(actor_id),
                action=action,
                module=module,
                resource_type=resource_type,
                resource_id=str(resource_id) if resource_id is not None else None,
                resource_name=resource_name,
                old_values=_as_json(old_values),
                new_values=_as_json(new_values),
                log_metadata=_as_json(metadata),
            )
            entry = await self.uow.activity_logs.create(entry)
            await self.uow.commit()
            return entry
        except Exception:
            logger.exception(
                f"Failed to record activity {module}:{action} by {actor_id}"
            )
            await self._discard()
            return None

    async def _discard(self) -> None:
        try:
            await self.uow.rollback()
        except Exception:
            logger.exception("Rollback of failed activity write failed")
