"""
Default Scheduler - library-wide delivery configuration.

Every API that accepts ``scheduler=None`` falls back to the scheduler returned
by get_default_scheduler(). Applications that deliver most events on a UI
thread can install a MainThreadScheduler once instead of passing it around.

Implementation:
    - get_default_scheduler(): lazy singleton, ImmediateScheduler unless replaced
    - set_default_scheduler(): replace the library-wide default
    - _reset_default_scheduler(): back to a fresh ImmediateScheduler (tests)
"""

from typing import Optional

from .scheduler import EventScheduler, ImmediateScheduler

_default_scheduler: Optional[EventScheduler] = None


def get_default_scheduler() -> EventScheduler:
    """
    Get or create the default scheduler.

    Lazy singleton pattern: an ImmediateScheduler is created on first access
    unless set_default_scheduler() installed something else.
    """
    global _default_scheduler
    if _default_scheduler is None:
        _default_scheduler = ImmediateScheduler()
    return _default_scheduler


def set_default_scheduler(scheduler: EventScheduler) -> None:
    """
    Replace the scheduler used when no scheduler is passed explicitly.

    Only affects handlers registered afterwards; handlers already registered
    keep the scheduler they were registered with.
    """
    if not isinstance(scheduler, EventScheduler):
        raise TypeError(
            f"Expected an EventScheduler, got {type(scheduler).__name__}"
        )

    global _default_scheduler
    _default_scheduler = scheduler


def resolve_scheduler(scheduler: Optional[EventScheduler]) -> EventScheduler:
    """Return ``scheduler`` or the default scheduler when it is None."""
    if scheduler is None:
        return get_default_scheduler()
    return scheduler


def _reset_default_scheduler() -> None:
    """
    Reset the default scheduler for testing purposes.

    Not for production use.
    """
    global _default_scheduler
    _default_scheduler = None
