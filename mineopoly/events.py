"""
Strategy event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class EventType(Enum):
    """Types of strategy events."""

    ROUND_START = "round_start"
    PATH_PLANNED = "path_planned"
    ITEM_RECEIVED = "item_received"
    INVENTORY_SOLD = "inventory_sold"
    ROUND_END = "round_end"


@dataclass
class GameEvent:
    """A logged event in a round."""

    event_type: EventType
    turn_number: int
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"[T{self.turn_number}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages a strategy's event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, turn_number: int, **details: Any) -> None:
        """Log an event."""
        self.events.append(GameEvent(event_type, turn_number, details))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def get_events_of_type(self, event_type: EventType) -> List[GameEvent]:
        """Get all events of one type."""
        return [event for event in self.events if event.event_type == event_type]
