"""
Hanson EventPublisher - Publish/Subscribe Core
==============================================

This module provides the EventPublisher abstract base class, the fan-out engine
shared by every event source in Hanson: observables, dynamic properties and
notification observables.

An EventPublisher provides:
- A table of event handlers, each registered together with a scheduler
- Token-based removal of handlers
- Publishing of one event to every registered handler
- Lifecycle hooks for subclasses that only observe something external while
  they have handlers

Thread Safety
-------------

Each publisher owns one re-entrant lock. Adding a handler, removing a handler
and dispatching a published event all happen while holding it, so these
operations are totally ordered for a single publisher. The lock is re-entrant
because a handler delivered by the immediate scheduler runs inside
``publish`` and may call back into the same publisher on the same thread.

Handlers are dispatched from a snapshot of the table: a handler that adds or
removes handlers during a publish does not disturb the dispatch in progress,
and handlers added that way do not receive the event being published.
"""

import threading
from abc import ABC
from functools import partial
from types import MappingProxyType
from typing import Callable, Dict, Generic, Mapping, Optional, Tuple, TypeVar

from ..scheduling.defaults import resolve_scheduler
from ..scheduling.scheduler import EventScheduler
from .token import EventHandlerToken

E = TypeVar("E")

EventHandler = Callable[[E], None]


class EventPublisher(ABC, Generic[E]):
    """
    Abstract base class for everything that publishes events to handlers.

    Subclasses publish events by calling ``publish``. Subclasses that wrap an
    external source (attribute observation, notification centers) override
    ``did_add_event_handler`` and ``did_remove_event_handler`` to start and
    stop observing that source.

    Example:
        ```python
        class Clicks(EventPublisher[str]):
            pass

        clicks = Clicks()
        token = clicks.add_event_handler(lambda button: print(button))
        clicks.publish("ok")        # prints "ok"
        clicks.remove_event_handler(token)
        clicks.publish("cancel")    # prints nothing
        ```
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._event_handlers: Dict[
            EventHandlerToken, Tuple[EventHandler[E], EventScheduler]
        ] = {}

    @property
    def lock(self) -> threading.RLock:
        """The re-entrant lock guarding handlers and event dispatch."""
        return self._lock

    @property
    def event_handlers(
        self,
    ) -> Mapping[EventHandlerToken, Tuple[EventHandler[E], EventScheduler]]:
        """Read-only snapshot of the registered handlers and their schedulers."""
        with self._lock:
            return MappingProxyType(dict(self._event_handlers))

    @property
    def has_event_handlers(self) -> bool:
        with self._lock:
            return bool(self._event_handlers)

    def add_event_handler(
        self,
        event_handler: EventHandler[E],
        scheduler: Optional[EventScheduler] = None,
    ) -> EventHandlerToken:
        """
        Register an event handler.

        Args:
            event_handler: Callable invoked with each published event.
            scheduler: Decides when and where the handler runs. Defaults to
                the library default scheduler (immediate unless configured).

        Returns:
            A token to pass to ``remove_event_handler``.
        """
        scheduler = resolve_scheduler(scheduler)

        with self._lock:
            token = EventHandlerToken()
            self._event_handlers[token] = (event_handler, scheduler)

            self.did_add_event_handler()

            return token

    def remove_event_handler(self, token: EventHandlerToken) -> None:
        """
        Remove the event handler registered under ``token``.

        Removing a token that is unknown or already removed does nothing.
        Deliveries that a scheduler has already queued still run.
        """
        with self._lock:
            self._event_handlers.pop(token, None)

            self.did_remove_event_handler()

    def publish(self, event: E) -> None:
        """
        Publish ``event`` to every registered handler through its scheduler.

        Publishing without handlers does nothing. An exception raised by a
        handler running on the publishing thread propagates to the caller.
        """
        with self._lock:
            handlers = tuple(self._event_handlers.values())

            for event_handler, scheduler in handlers:
                scheduler.schedule(partial(event_handler, event))

    def did_add_event_handler(self) -> None:
        """
        Hook invoked after a handler was added, with the lock held.

        Subclasses can override this to set up resources used for publishing.
        """
        pass

    def did_remove_event_handler(self) -> None:
        """
        Hook invoked after a handler was removed, with the lock held.

        Subclasses can override this to release resources once the last
        handler is gone.
        """
        pass
