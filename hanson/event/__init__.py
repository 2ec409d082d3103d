"""
Hanson Event Module
===================

Event publishing primitives: handler tokens, the ValueChange event and the
EventPublisher base class.
"""

from hanson.event.change import ValueChange
from hanson.event.publisher import EventHandler, EventPublisher
from hanson.event.token import EventHandlerToken

__all__ = [
    "EventPublisher",
    "EventHandler",
    "EventHandlerToken",
    "ValueChange",
]
