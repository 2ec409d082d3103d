"""
Hanson EventHandlerToken - Handler Registration Keys
====================================================

Every call to ``EventPublisher.add_event_handler`` returns a fresh token. The
token is the only way to remove that handler again, and it is never reused.
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EventHandlerToken:
    """Opaque, hashable key identifying one registered event handler."""

    id: UUID = field(default_factory=uuid4)

    def __repr__(self) -> str:
        return f"EventHandlerToken({self.id.hex[:8]})"
