"""Group events by calendar day for month and agenda views."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime

from calendar_layout.schema import Event


def day_key(instant: datetime) -> date:
    return instant.date()


def bucket_by_day(events: list[Event]) -> dict[date, list[Event]]:
    """Map each start day to its events in chronological order.

    An event belongs only to the day it starts on, even when it runs past
    midnight.
    """

    buckets: dict[date, list[Event]] = defaultdict(list)
    for event in sorted(events, key=lambda e: e.start_time):
        buckets[day_key(event.start_time)].append(event)
    return dict(buckets)


def events_for_day(events: list[Event], day: date) -> list[Event]:
    """Return the events starting on ``day`` sorted by start time."""

    return sorted((e for e in events if day_key(e.start_time) == day), key=lambda e: e.start_time)
