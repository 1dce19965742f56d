"""Boundary checks applied before events reach the layout engine."""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

from calendar_layout.config import DEFAULT_MIN_DURATION_MINUTES
from calendar_layout.schema import Event


def validate_events(events: list[Event]) -> list[Event]:
    """Reject zero/negative-duration events and duplicate ids."""

    seen: set[str] = set()
    for event in events:
        if event.start_time >= event.end_time:
            raise ValueError(f"Event {event.id!r}: start_time must be before end_time")
        if event.id in seen:
            raise ValueError(f"Event {event.id!r}: duplicate id")
        seen.add(event.id)
    return events


def normalize_events(
    events: list[Event],
    min_duration: timedelta = timedelta(minutes=DEFAULT_MIN_DURATION_MINUTES),
) -> list[Event]:
    """Stretch zero/negative-duration events to ``min_duration`` from their start."""

    normalized = []
    for event in events:
        if event.start_time >= event.end_time:
            event = replace(event, end_time=event.start_time + min_duration)
        normalized.append(event)
    return normalized
