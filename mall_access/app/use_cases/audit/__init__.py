"""
Audit Use Cases

Activity log queries and dashboard rollups.
"""

from .list_activity_use_case import ListActivityUseCase
from .get_activity_use_case import GetActivityUseCase
from .aggregate_by_module_use_case import AggregateByModuleUseCase
from .aggregate_by_day_use_case import AggregateByDayUseCase
from .recent_activity_use_case import RecentActivityUseCase
from .list_actor_options_use_case import ListActorOptionsUseCase

__all__ = [
    "ListActivityUseCase",
    "GetActivityUseCase",
    "AggregateByModuleUseCase",
    "AggregateByDayUseCase",
    "RecentActivityUseCase",
    "ListActorOptionsUseCase",
]
