"""Core data schema for calendar events."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any


@dataclass
class Event:
    """Time-ranged event as supplied by the data-fetch layer.

    ``payload`` carries clinic fields (title, type, therapistId, ...) that the
    layout engine passes through without inspecting.
    """

    id: str
    start_time: datetime
    end_time: datetime
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time


@dataclass
class PositionedEvent(Event):
    """Event annotated with its display column inside an overlap group."""

    column: int = 0
    total_columns: int = 1

    @classmethod
    def from_event(cls, event: Event, column: int, total_columns: int) -> "PositionedEvent":
        return cls(
            id=event.id,
            start_time=event.start_time,
            end_time=event.end_time,
            payload=event.payload,
            column=column,
            total_columns=total_columns,
        )
