"""
Hanson Notifications - Named Broadcasts as Event Publishers
===========================================================

This module provides a small in-process notification center and an adapter
that exposes one kind of notification as an EventPublisher.

Notifications are identified by a name and optionally filtered by sender.
Observers registered without a sender receive the notification from any
sender; observers registered with a sender only receive notifications posted
by that exact object.

```python
center = NotificationCenter()
logins = center.observable("user.login")
logins.add_event_handler(lambda note: print(note.user_info["name"]))

center.post("user.login", name="alice")   # prints "alice"
```

A NotificationObservable registers with its center only while it has at
least one event handler, and publishes every received Notification verbatim.
"""

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Tuple

from hanson.event.publisher import EventPublisher

NotificationObserver = Callable[["Notification"], None]


@dataclass(frozen=True)
class Notification:
    """A named broadcast with an optional sender and payload."""

    name: str
    sender: Any = None
    user_info: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


class NotificationCenter:
    """
    Routes posted notifications to observers by name and sender.

    Observers run synchronously on the posting thread, outside the center's
    lock, in registration order.
    """

    _default: Optional["NotificationCenter"] = None
    _default_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._observers: List[Tuple[NotificationObserver, str, Any]] = []

    @classmethod
    def default(cls) -> "NotificationCenter":
        """Get or create the process-wide notification center."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    @classmethod
    def _reset_default(cls) -> None:
        """Drop the process-wide center. Testing only."""
        with cls._default_lock:
            cls._default = None

    def add_observer(
        self, observer: NotificationObserver, name: str, sender: Any = None
    ) -> None:
        """Call ``observer`` for notifications named ``name`` from ``sender`` (any if None)."""
        with self._lock:
            self._observers.append((observer, name, sender))

    def remove_observer(
        self,
        observer: NotificationObserver,
        name: Optional[str] = None,
        sender: Any = None,
    ) -> None:
        """
        Remove registrations of ``observer``.

        ``name`` and ``sender`` narrow the removal when given; None matches
        any name or sender.
        """
        with self._lock:
            self._observers = [
                entry
                for entry in self._observers
                if not self._registration_matches(entry, observer, name, sender)
            ]

    @staticmethod
    def _registration_matches(
        entry: Tuple[NotificationObserver, str, Any],
        observer: NotificationObserver,
        name: Optional[str],
        sender: Any,
    ) -> bool:
        registered_observer, registered_name, registered_sender = entry
        if registered_observer != observer:
            return False
        if name is not None and registered_name != name:
            return False
        if sender is not None and registered_sender is not sender:
            return False
        return True

    def observer_count(self, name: Optional[str] = None) -> int:
        """Number of registrations, optionally only those for ``name``."""
        with self._lock:
            if name is None:
                return len(self._observers)
            return sum(1 for _, registered, _ in self._observers if registered == name)

    def post(self, name: str, sender: Any = None, /, **user_info: Any) -> Notification:
        """
        Build a Notification and deliver it to every matching observer.

        ``name`` and ``sender`` are positional-only, so ``user_info`` may carry
        keys of the same names.
        """
        notification = Notification(name, sender, MappingProxyType(dict(user_info)))
        self.post_notification(notification)
        return notification

    def post_notification(self, notification: Notification) -> None:
        """Deliver an existing Notification to every matching observer."""
        with self._lock:
            observers = [
                observer
                for observer, name, sender in self._observers
                if name == notification.name
                and (sender is None or sender is notification.sender)
            ]

        for observer in observers:
            observer(notification)

    def observable(self, name: str, sender: Any = None) -> "NotificationObservable":
        """Create a NotificationObservable for ``name`` on this center."""
        return NotificationObservable(self, name, sender)


class NotificationObservable(EventPublisher[Notification]):
    """
    An EventPublisher of the notifications posted under one name.

    Args:
        center: The notification center to observe.
        name: The notification name to observe.
        sender: Only observe notifications from this object, or from any
            sender when None.
    """

    def __init__(
        self, center: NotificationCenter, name: str, sender: Any = None
    ) -> None:
        super().__init__()
        self.center = center
        self.name = name
        self.sender = sender
        self.is_observing = False

    def did_add_event_handler(self) -> None:
        self._start_observation()

    def did_remove_event_handler(self) -> None:
        if not self._event_handlers:
            self._stop_observation()

    def _start_observation(self) -> None:
        if self.is_observing:
            return

        self.center.add_observer(self._did_receive, self.name, self.sender)
        self.is_observing = True

        logging.debug(f"Started observing notification '{self.name}'")

    def _stop_observation(self) -> None:
        if not self.is_observing:
            return

        self.center.remove_observer(self._did_receive, self.name, self.sender)
        self.is_observing = False

        logging.debug(f"Stopped observing notification '{self.name}'")

    def _did_receive(self, notification: Notification) -> None:
        self.publish(notification)

    def __repr__(self) -> str:
        return f"NotificationObservable({self.name!r})"
