"""
Hanson - Lightweight Observations and Bindings

Observable values that publish old/new value pairs to event handlers, pluggable
delivery schedulers, and an ObservationManager that tears down groups of
observations and bindings at once.
"""

__version__ = "1.0.0"

from .event import EventHandler, EventHandlerToken, EventPublisher, ValueChange
from .exceptions import HansonError, TypeMismatchError, UnsupportedReadError
from .observable import (
    Bindable,
    CustomBindable,
    DynamicProperty,
    KeyValueObserving,
    Notification,
    NotificationCenter,
    NotificationObservable,
    Observable,
    ObservableAttribute,
    Property,
)
from .observation import Observation, ObservationManager, Observer
from .scheduling import (
    CurrentThreadScheduler,
    EventLoopScheduler,
    EventScheduler,
    ImmediateScheduler,
    MainThreadScheduler,
    ThreadAffinityScheduler,
    get_default_scheduler,
    set_default_scheduler,
)

__all__ = [
    # Event publishing
    "EventPublisher",
    "EventHandler",
    "EventHandlerToken",
    "ValueChange",
    # Observables
    "Observable",
    "Property",
    "ObservableAttribute",
    "Bindable",
    "CustomBindable",
    # Adapters
    "KeyValueObserving",
    "DynamicProperty",
    "Notification",
    "NotificationCenter",
    "NotificationObservable",
    # Observations
    "Observation",
    "ObservationManager",
    "Observer",
    # Scheduling
    "EventScheduler",
    "ImmediateScheduler",
    "CurrentThreadScheduler",
    "ThreadAffinityScheduler",
    "MainThreadScheduler",
    "EventLoopScheduler",
    "get_default_scheduler",
    "set_default_scheduler",
    # Exceptions
    "HansonError",
    "UnsupportedReadError",
    "TypeMismatchError",
]
