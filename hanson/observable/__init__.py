"""
Hanson Observable Module
========================

Event publishers holding or mirroring a value, and the Bindable protocol for
binding targets.
"""

from hanson.observable.bindable import Bindable, CustomBindable
from hanson.observable.descriptors import ObservableAttribute
from hanson.observable.dynamic import DynamicProperty, KeyValueObserving
from hanson.observable.notification import (
    Notification,
    NotificationCenter,
    NotificationObservable,
)
from hanson.observable.observable import Observable, Property

__all__ = [
    "Observable",
    "Property",
    "Bindable",
    "CustomBindable",
    "ObservableAttribute",
    "KeyValueObserving",
    "DynamicProperty",
    "Notification",
    "NotificationCenter",
    "NotificationObservable",
]
