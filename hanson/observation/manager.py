"""
Hanson ObservationManager - Grouped Subscription Lifecycle
==========================================================

This module provides the ObservationManager, which records every observation
and binding made on behalf of one owner so they can be removed individually or
all at once.

Key behaviors:
- ``observe`` registers a handler on an event publisher and records it
- ``bind`` keeps a Bindable's value in sync with a value-holding publisher
- ``unobserve`` / ``unobserve_all`` remove handlers from their publishers
- A manager that is garbage collected, closed, or used as a context manager
  removes every handler it registered, so none outlives it

Every Observation holds a strong reference to its publisher. A publisher that
is only referenced by a manager stays alive until it is unobserved.

Thread Safety
-------------

The manager's own re-entrant lock guards its list of observations. ``observe``
registers with the publisher before recording the observation, inside the
same critical section, so ``unobserve_all`` never sees an observation whose
handler is not installed. Operations spanning two publishers, such as a
binding, are not atomic across them.

Example:
    ```python
    manager = ObservationManager()

    source = Observable("X")
    target = Observable("")
    manager.bind(source, target)     # target.value == "X"

    source.value = "Y"               # target.value == "Y"
    target.value = "Z"               # source.value is still "Y"

    manager.unobserve_all()
    ```
"""

import logging
import threading
import weakref
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from hanson.event.publisher import EventHandler, EventPublisher
from hanson.observable.bindable import Bindable, CustomBindable
from hanson.scheduling.defaults import resolve_scheduler
from hanson.scheduling.scheduler import EventScheduler

from .observation import Observation

E = TypeVar("E")
T = TypeVar("T")
V = TypeVar("V")


def _remove_event_handlers(observations: List[Observation], lock: threading.RLock) -> None:
    # Shared by unobserve_all() and the finalizer; must not reference the manager
    with lock:
        if not observations:
            return

        count = len(observations)
        try:
            for observation in observations:
                observation.remove_event_handler()
        finally:
            observations.clear()

        logging.debug(f"Removed {count} observation(s)")


class ObservationManager:
    """Records observations and bindings so they can be torn down together."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._observations: List[Observation] = []
        self._finalizer = weakref.finalize(
            self, _remove_event_handlers, self._observations, self._lock
        )

    @property
    def observations(self) -> Tuple[Observation, ...]:
        """Snapshot of the live observations, in creation order."""
        with self._lock:
            return tuple(self._observations)

    def observe(
        self,
        event_publisher: EventPublisher[E],
        event_handler: EventHandler[E],
        scheduler: Optional[EventScheduler] = None,
    ) -> Observation:
        """
        Observe an event publisher for events.

        Args:
            event_publisher: The publisher to observe.
            event_handler: Invoked with every published event.
            scheduler: Decides when and where the handler runs.

        Returns:
            The observation that has been created.
        """
        with self._lock:
            token = event_publisher.add_event_handler(event_handler, scheduler)

            observation = Observation(event_publisher, token)
            self._observations.append(observation)

            return observation

    def bind(
        self,
        event_publisher: EventPublisher[Any],
        bindable: Bindable[V],
        scheduler: Optional[EventScheduler] = None,
    ) -> Observation:
        """
        Bind the value of a value-holding event publisher to a bindable.

        The bindable receives the publisher's current value through the
        scheduler, and again after every event the publisher publishes. The
        binding is one-directional: writing the bindable never writes back.

        With the immediate scheduler the bindable holds the publisher's value
        when this method returns. With a thread affinity scheduler called from
        another thread, the initial assignment is queued like any other event.

        Args:
            event_publisher: A publisher with a readable ``value``, such as an
                Observable or DynamicProperty.
            bindable: The target to keep up to date.
            scheduler: Decides when and where the bindable is updated.

        Returns:
            The observation that has been created. Unobserve it to break the
            binding.
        """
        scheduler = resolve_scheduler(scheduler)

        # The observation keeps the publisher alive; the handler must not
        publisher_ref = weakref.ref(event_publisher)

        def update_bindable(_event: Any = None) -> None:
            publisher = publisher_ref()
            if publisher is not None:
                bindable.value = publisher.value

        scheduler.schedule(update_bindable)

        return self.observe(event_publisher, update_bindable, scheduler)

    def bind_setter(
        self,
        event_publisher: EventPublisher[Any],
        target: T,
        setter: Callable[[T, V], None],
        scheduler: Optional[EventScheduler] = None,
    ) -> Observation:
        """
        Bind the value of an event publisher to a target through a setter.

        Convenience for ``bind(event_publisher, CustomBindable(target, setter))``.
        """
        return self.bind(event_publisher, CustomBindable(target, setter), scheduler)

    def unobserve(self, observation: Observation) -> None:
        """
        Remove an observation and its event handler.

        Observations this manager does not track are ignored.
        """
        with self._lock:
            try:
                index = self._observations.index(observation)
            except ValueError:
                return

            observation.remove_event_handler()
            del self._observations[index]

    def unobserve_all(self) -> None:
        """Remove every observation and its event handler."""
        _remove_event_handlers(self._observations, self._lock)

    def close(self) -> None:
        """Alias of unobserve_all() for use with contextlib.closing and friends."""
        self.unobserve_all()

    def __enter__(self) -> "ObservationManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.unobserve_all()

    def __len__(self) -> int:
        with self._lock:
            return len(self._observations)

    def __contains__(self, observation: object) -> bool:
        with self._lock:
            return observation in self._observations

    def __repr__(self) -> str:
        return f"ObservationManager({len(self)} observation(s))"
