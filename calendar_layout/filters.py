"""Staff and event-type filter stage run ahead of the layout engine."""

from __future__ import annotations

from typing import Iterable, Optional

from calendar_layout.schema import Event


def filter_events(
    events: list[Event],
    therapists: Optional[Iterable[str]] = None,
    event_types: Optional[Iterable[str]] = None,
) -> list[Event]:
    """Keep events matching the selected therapists and event types.

    An empty or missing selection does not filter on that field.
    """

    therapist_ids = set(therapists or ())
    type_ids = set(event_types or ())

    result = []
    for event in events:
        if therapist_ids and event.payload.get("therapistId") not in therapist_ids:
            continue
        if type_ids and event.payload.get("type") not in type_ids:
            continue
        result.append(event)
    return result
