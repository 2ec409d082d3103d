"""
Hanson Observer - Objects Owning an ObservationManager
======================================================

Observer is a mixin for classes that make observations. A class provides its
ObservationManager explicitly and gets ``observe``, ``bind``, ``unobserve`` and
``unobserve_all`` forwarding to it.

```python
class ProfileView(Observer):
    def __init__(self, profile):
        self._observation_manager = ObservationManager()
        self.bind(profile.name, self.title_label)

    @property
    def observation_manager(self):
        return self._observation_manager
```
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, TypeVar

from hanson.event.publisher import EventHandler, EventPublisher
from hanson.observable.bindable import Bindable
from hanson.scheduling.scheduler import EventScheduler

from .manager import ObservationManager
from .observation import Observation

E = TypeVar("E")
T = TypeVar("T")
V = TypeVar("V")


class Observer(ABC):
    """Mixin forwarding observation methods to an ObservationManager."""

    @property
    @abstractmethod
    def observation_manager(self) -> ObservationManager:
        """The manager recording the observations made by this object."""
        pass

    def observe(
        self,
        event_publisher: EventPublisher[E],
        event_handler: EventHandler[E],
        scheduler: Optional[EventScheduler] = None,
    ) -> Observation:
        return self.observation_manager.observe(event_publisher, event_handler, scheduler)

    def bind(
        self,
        event_publisher: EventPublisher[Any],
        bindable: Bindable[V],
        scheduler: Optional[EventScheduler] = None,
    ) -> Observation:
        return self.observation_manager.bind(event_publisher, bindable, scheduler)

    def bind_setter(
        self,
        event_publisher: EventPublisher[Any],
        target: T,
        setter: Callable[[T, V], None],
        scheduler: Optional[EventScheduler] = None,
    ) -> Observation:
        return self.observation_manager.bind_setter(
            event_publisher, target, setter, scheduler
        )

    def unobserve(self, observation: Observation) -> None:
        self.observation_manager.unobserve(observation)

    def unobserve_all(self) -> None:
        self.observation_manager.unobserve_all()
