"""Greedy column assignment within one overlap group."""

from __future__ import annotations

from datetime import datetime

from calendar_layout.schema import Event, PositionedEvent


def _placement_key(event: Event):
    # Longer events first on equal starts so they claim the lower columns.
    return (event.start_time, -event.duration)


def assign_columns(group: list[Event]) -> list[PositionedEvent]:
    """Assign each event the first column whose previous occupant has ended.

    Every event in the group receives the group's final column count as
    ``total_columns``, regardless of which column it occupies.
    """

    column_end_times: list[datetime] = []
    placed: list[tuple[Event, int]] = []

    for event in sorted(group, key=_placement_key):
        column = 0
        while column < len(column_end_times) and column_end_times[column] > event.start_time:
            column += 1

        if column == len(column_end_times):
            column_end_times.append(event.end_time)
        else:
            column_end_times[column] = event.end_time
        placed.append((event, column))

    total_columns = len(column_end_times)
    return [PositionedEvent.from_event(event, column, total_columns) for event, column in placed]
