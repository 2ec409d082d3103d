"""
Hanson Observable - Observable Value Cells
==========================================

This module provides the Observable class, a mutable value cell that publishes
a ValueChange event every time its value is written.

Reads, writes and the publish triggered by a write share the publisher's lock.
A write captures the old value, stores the new one and publishes the matching
ValueChange in one critical section, so concurrent writers are serialized and
every event describes exactly one write.

Example:
    ```python
    name = Observable("Alice")
    name.add_event_handler(lambda change: print(change.old_value, "->", change.new_value))

    name.value = "Bob"             # prints "Alice -> Bob"
    name.silently_update("Carol")  # prints nothing
    name.value = "Dave"            # prints "Carol -> Dave"
    ```
"""

from typing import TypeVar

from hanson.event.change import ValueChange
from hanson.event.publisher import EventPublisher

V = TypeVar("V")


class Observable(EventPublisher[ValueChange[V]]):
    """
    A value that publishes a ValueChange whenever it is set.

    Observables satisfy the Bindable protocol and can therefore be both the
    source and the target of a binding.
    """

    def __init__(self, value: V) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> V:
        """The current value. Setting it publishes a ValueChange."""
        with self._lock:
            return self._value

    @value.setter
    def value(self, new_value: V) -> None:
        with self._lock:
            old_value = self._value
            self._value = new_value

            self.publish(ValueChange(old_value, new_value))

    def set(self, value: V) -> "Observable[V]":
        """Set the value and publish a ValueChange, returning self for chaining."""
        self.value = value
        return self

    def silently_update(self, value: V) -> None:
        """
        Update the value without publishing an event.

        The next regular write publishes the silently updated value as its
        ``old_value``.
        """
        with self._lock:
            self._value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


# Alias for code written against the older name
Property = Observable
