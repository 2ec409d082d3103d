"""
Hanson Scheduling
=================

Schedulers decide when and on which thread an event handler runs.
"""

from .defaults import get_default_scheduler, set_default_scheduler
from .loop import EventLoopScheduler
from .scheduler import CurrentThreadScheduler, EventScheduler, ImmediateScheduler
from .thread import MainThreadScheduler, ThreadAffinityScheduler

__all__ = [
    "EventScheduler",
    "ImmediateScheduler",
    "CurrentThreadScheduler",
    "ThreadAffinityScheduler",
    "MainThreadScheduler",
    "EventLoopScheduler",
    "get_default_scheduler",
    "set_default_scheduler",
]
