"""
Hanson Bindable - Settable Value Targets
========================================

A Bindable is anything with a settable ``value``. It is the target side of
``ObservationManager.bind``: observables and dynamic properties are bindable,
and CustomBindable turns any object plus a setter function into one.
"""

import logging
import weakref
from typing import Callable, Generic, Protocol, TypeVar, runtime_checkable

from ..exceptions import UnsupportedReadError

T = TypeVar("T")
V = TypeVar("V")


@runtime_checkable
class Bindable(Protocol[V]):
    """
    Protocol for objects exposing a settable ``value``.

    Reading ``value`` may legitimately be unsupported, as it is for
    CustomBindable, which only knows how to write.
    """

    value: V


class CustomBindable(Generic[T, V]):
    """
    Write-only bindable that forwards every value to a setter function.

    The target is referenced weakly, so binding to one of its attributes does
    not keep it alive. Values written after the target has been collected are
    dropped.

    Example:
        ```python
        label = Label()
        bindable = CustomBindable(label, lambda label, text: label.set_text(text))
        manager.bind(title, bindable)
        ```

    Args:
        target: The object owning the state being written.
        setter: Called as ``setter(target, value)`` for every written value.
    """

    def __init__(self, target: T, setter: Callable[[T, V], None]) -> None:
        self._target_ref = weakref.ref(target)
        self.setter = setter

    @property
    def target(self) -> T:
        target = self._target_ref()
        if target is None:
            raise ReferenceError("The target of this custom bindable no longer exists")
        return target

    @property
    def value(self) -> V:
        raise UnsupportedReadError(
            "Retrieving a value from a custom bindable is not supported"
        )

    @value.setter
    def value(self, value: V) -> None:
        target = self._target_ref()
        if target is None:
            # Target collected: nothing left to update
            logging.debug(f"Dropped write to collected target of {self!r}")
            return
        self.setter(target, value)

    def __repr__(self) -> str:
        return f"CustomBindable({getattr(self.setter, '__qualname__', self.setter)!r})"
