"""
Hanson DynamicProperty - Observing Attributes of Existing Objects
=================================================================

This module bridges plain attribute assignment into Hanson events.

``KeyValueObserving`` is a mixin that reports attribute writes to registered
attribute observers as ``(key, old_value, new_value)``. ``DynamicProperty``
turns one attribute of such an object into an EventPublisher of
ValueChange events that can be observed and bound like any Observable.

```python
class Player(KeyValueObserving):
    def __init__(self, score):
        self.score = score

player = Player(0)
score = player.dynamic_property("score", int)
score.add_event_handler(print)

player.score = 10   # prints ValueChange(old_value=0, new_value=10)
score.value = 20    # writes through: player.score == 20
```

Lifecycle
---------

A DynamicProperty only observes its target while it has event handlers: it
registers with the target when the first handler is added and unregisters
when the last one is removed. While observing it can keep a strong reference
to the target (``retain_target=True``, the default) so that an observed object
cannot disappear underneath its observers. Otherwise the target is only
referenced weakly.

Types
-----

Attributes of arbitrary objects are untyped, so every value read from the
target is checked against ``value_type``. A mismatch raises
TypeMismatchError instead of publishing a wrongly typed event.
"""

import logging
import threading
import weakref
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union

from hanson.event.change import ValueChange
from hanson.event.publisher import EventPublisher
from hanson.exceptions import TypeMismatchError

V = TypeVar("V")

AttributeObserver = Callable[[str, Any, Any], None]


class _Missing:
    """Type of MISSING, the old value of an attribute that did not exist yet."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class _AttributeObserverRegistry:
    """Per-instance table of attribute observers."""

    __slots__ = ("lock", "observers")

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.observers: Dict[str, List[AttributeObserver]] = {}


class KeyValueObserving:
    """
    Mixin reporting attribute writes to attribute observers.

    Writes to attributes without observers take the plain ``object.__setattr__``
    path. Observers are called after the write, on the writing thread, with
    the value before the write (MISSING if the attribute did not exist yet) and
    the value read back after it.
    """

    def _attribute_observer_registry(self) -> _AttributeObserverRegistry:
        registry = self.__dict__.get("_kvo_registry")
        if registry is None:
            # setdefault keeps the first registry if two threads race here
            registry = self.__dict__.setdefault(
                "_kvo_registry", _AttributeObserverRegistry()
            )
        return registry

    def add_attribute_observer(self, key: str, observer: AttributeObserver) -> None:
        """Call ``observer(key, old_value, new_value)`` whenever ``key`` is written."""
        registry = self._attribute_observer_registry()
        with registry.lock:
            registry.observers.setdefault(key, []).append(observer)

    def remove_attribute_observer(self, key: str, observer: AttributeObserver) -> None:
        """Remove one registration of ``observer`` for ``key``. Unknown observers are ignored."""
        registry = self._attribute_observer_registry()
        with registry.lock:
            observers = registry.observers.get(key)
            if not observers:
                return
            try:
                observers.remove(observer)
            except ValueError:
                return
            if not observers:
                del registry.observers[key]

    def __setattr__(self, key: str, value: Any) -> None:
        registry = self.__dict__.get("_kvo_registry")
        if registry is None:
            super().__setattr__(key, value)
            return

        with registry.lock:
            observers = tuple(registry.observers.get(key, ()))
            if not observers:
                super().__setattr__(key, value)
                return

            old_value = getattr(self, key, MISSING)
            super().__setattr__(key, value)
            new_value = getattr(self, key)

        # Outside the registry lock: observers take their own locks
        for observer in observers:
            observer(key, old_value, new_value)

    def dynamic_property(
        self,
        key: str,
        value_type: Union[Type[V], Tuple[type, ...]],
        retain_target: bool = True,
    ) -> "DynamicProperty[V]":
        """Create a DynamicProperty observing ``key`` on this object."""
        return DynamicProperty(self, key, value_type, retain_target=retain_target)


class DynamicProperty(EventPublisher[ValueChange[V]]):
    """
    An EventPublisher mirroring one attribute of a KeyValueObserving object.

    Args:
        target: The object owning the attribute.
        key: Name of the attribute to mirror and observe.
        value_type: Expected type (or tuple of types) of the attribute's values.
        retain_target: Whether to keep a strong reference to ``target`` while
            observing.
    """

    def __init__(
        self,
        target: KeyValueObserving,
        key: str,
        value_type: Union[Type[V], Tuple[type, ...]],
        retain_target: bool = True,
    ) -> None:
        if not isinstance(target, KeyValueObserving):
            raise TypeError(
                f"DynamicProperty targets must inherit from KeyValueObserving, "
                f"got {type(target).__name__}"
            )

        super().__init__()
        self._target_ref = weakref.ref(target)
        self.key = key
        self.value_type = value_type
        self.retain_target = retain_target
        self.retained_target: Optional[KeyValueObserving] = None
        self.is_observing = False

    @property
    def target(self) -> KeyValueObserving:
        target = self._target_ref()
        if target is None:
            raise ReferenceError(
                f"The target of dynamic property '{self.key}' no longer exists"
            )
        return target

    @property
    def value(self) -> V:
        """The attribute's current value, read from and written to the target."""
        return self._checked(getattr(self.target, self.key))

    @value.setter
    def value(self, new_value: V) -> None:
        setattr(self.target, self.key, new_value)

    def did_add_event_handler(self) -> None:
        self._start_observation()

    def did_remove_event_handler(self) -> None:
        if not self._event_handlers:
            self._stop_observation()

    def _start_observation(self) -> None:
        if self.is_observing:
            return

        target = self.target
        target.add_attribute_observer(self.key, self._attribute_did_change)
        self.is_observing = True

        if self.retain_target:
            self.retained_target = target

        logging.debug(f"Started observing '{self.key}' on {type(target).__name__}")

    def _stop_observation(self) -> None:
        if not self.is_observing:
            return

        target = self._target_ref()
        if target is not None:
            target.remove_attribute_observer(self.key, self._attribute_did_change)

        self.is_observing = False
        self.retained_target = None

        logging.debug(f"Stopped observing '{self.key}'")

    def _attribute_did_change(self, key: str, old_value: Any, new_value: Any) -> None:
        # A newly created attribute has no typed previous value
        if old_value is MISSING:
            old_value = None
        else:
            old_value = self._checked(old_value)

        change = ValueChange(old_value, self._checked(new_value))
        self.publish(change)

    def _checked(self, value: Any) -> V:
        if not isinstance(value, self.value_type):
            raise TypeMismatchError(self.key, self.value_type, value)
        return value

    def __repr__(self) -> str:
        target = self._target_ref()
        owner = type(target).__name__ if target is not None else "<released>"
        return f"DynamicProperty({owner}.{self.key})"
