"""
Hanson Observation - Revocable Subscription Handles
===================================================

An Observation represents one event handler registered on one event publisher
through an ObservationManager. It keeps the publisher alive for as long as the
observation exists and knows how to remove the handler again.
"""

from typing import Any
from uuid import uuid4

from hanson.event.publisher import EventPublisher
from hanson.event.token import EventHandlerToken


class Observation:
    """
    Handle for one event handler registration made by an ObservationManager.

    Observations compare equal only to themselves, by a unique id.
    """

    __slots__ = ("id", "event_publisher", "event_handler_token")

    def __init__(
        self, event_publisher: EventPublisher[Any], event_handler_token: EventHandlerToken
    ) -> None:
        self.id = uuid4()
        self.event_publisher = event_publisher
        self.event_handler_token = event_handler_token

    def remove_event_handler(self) -> None:
        """Remove the handler this observation stands for from its publisher."""
        self.event_publisher.remove_event_handler(self.event_handler_token)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Observation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Observation({self.id.hex[:8]}, {self.event_publisher!r})"
