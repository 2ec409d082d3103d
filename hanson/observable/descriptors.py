"""
Hanson ObservableAttribute - Observable Class Attributes
========================================================

This module provides a descriptor that makes a plain-looking class attribute
observable. Reading the attribute returns the value, writing it publishes a
ValueChange, and the Observable behind it is available for subscribing and
binding.

```python
class Profile:
    name = ObservableAttribute("Alice")

profile = Profile()
Profile.name.of(profile).add_event_handler(print)

profile.name = "Bob"   # prints ValueChange(old_value='Alice', new_value='Bob')
print(profile.name)    # "Bob"
```

Each instance gets its own Observable, created on first access and stored in
the instance ``__dict__``. Class-level access returns the descriptor itself.
"""

import threading
from typing import Any, Callable, Generic, Optional, Type, TypeVar, overload

from .observable import Observable

V = TypeVar("V")

_MISSING: Any = object()


class ObservableAttribute(Generic[V]):
    """
    Descriptor for creating observable instance attributes.

    Args:
        default: Initial value of every instance's observable.
        default_factory: Zero-argument callable producing the initial value,
            for mutable defaults that must not be shared between instances.
    """

    def __init__(
        self,
        default: V = _MISSING,
        *,
        default_factory: Optional[Callable[[], V]] = None,
    ) -> None:
        if default is not _MISSING and default_factory is not None:
            raise ValueError("Cannot specify both default and default_factory")

        self.default = None if default is _MISSING else default
        self.default_factory = default_factory
        self.attr_name: Optional[str] = None
        self._storage_name: Optional[str] = None
        self._lock = threading.Lock()

    def __set_name__(self, owner: Type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.attr_name = name
        self._storage_name = f"_{name}_observable"

    def of(self, instance: object) -> Observable[V]:
        """Get the Observable backing this attribute on ``instance``."""
        if self._storage_name is None:
            raise TypeError(
                "ObservableAttribute must be assigned to a class attribute before use"
            )

        storage = instance.__dict__
        observable = storage.get(self._storage_name)
        if observable is None:
            with self._lock:
                observable = storage.get(self._storage_name)
                if observable is None:
                    observable = Observable(self._initial_value())
                    storage[self._storage_name] = observable
        return observable

    # Alias reading naturally at call sites: Profile.name.observable(profile)
    observable = of

    def _initial_value(self) -> V:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    @overload
    def __get__(self, instance: None, owner: Type) -> "ObservableAttribute[V]": ...

    @overload
    def __get__(self, instance: object, owner: Type) -> V: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return self.of(instance).value

    def __set__(self, instance: object, value: V) -> None:
        self.of(instance).value = value

    def __repr__(self) -> str:
        return f"ObservableAttribute({self.attr_name!r}, default={self.default!r})"
