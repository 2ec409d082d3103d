"""
Hanson EventScheduler - Delivery Strategies
===========================================

An event publisher never calls an event handler directly. It hands a closure
to the scheduler that was registered together with the handler, and the
scheduler decides when and on which thread the closure runs.

Available schedulers:

- ``ImmediateScheduler``: runs the closure right away on the calling thread.
- ``ThreadAffinityScheduler`` / ``MainThreadScheduler``: run the closure on one
  designated thread (see ``hanson.scheduling.thread``).
- ``EventLoopScheduler``: runs the closure on the thread of an asyncio event
  loop (see ``hanson.scheduling.loop``).
"""

from abc import ABC, abstractmethod
from typing import Callable


class EventScheduler(ABC):
    """Strategy deciding when and where an event handler invocation runs."""

    @abstractmethod
    def schedule(self, closure: Callable[[], None]) -> None:
        """
        Run ``closure`` according to this scheduler's delivery policy.

        Args:
            closure: A zero-argument callable that delivers one event to one
                handler.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ImmediateScheduler(EventScheduler):
    """Invokes closures synchronously on the calling thread."""

    def schedule(self, closure: Callable[[], None]) -> None:
        closure()


# Alias for code written against the older name
CurrentThreadScheduler = ImmediateScheduler
