"""Change-driven rebuild scheduling."""

from .observer import WATCHED_CONFIG_FILES, ChangeEventHandler, ChangeFilter, start_observer
from .scheduler import ChangeEvent, RebuildScheduler, SchedulerState

__all__ = [
    "ChangeEvent",
    "ChangeEventHandler",
    "ChangeFilter",
    "RebuildScheduler",
    "SchedulerState",
    "WATCHED_CONFIG_FILES",
    "start_observer",
]
