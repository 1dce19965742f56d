"""Partition events into connected overlap groups."""

from __future__ import annotations

from calendar_layout.schema import Event


def events_overlap(a: Event, b: Event) -> bool:
    """Half-open overlap: an event ending at T does not overlap one starting at T."""

    return a.start_time < b.end_time and b.start_time < a.end_time


def group_overlapping(events: list[Event]) -> list[list[Event]]:
    """Group events that overlap directly or transitively.

    Flood fill over the implicit interval graph: every unclaimed event seeds a
    group, and the whole list is rescanned against each member added until the
    group stops growing. Quadratic in the worst case.
    """

    groups: list[list[Event]] = []
    claimed: set[str] = set()

    for event in events:
        if event.id in claimed:
            continue

        group = [event]
        claimed.add(event.id)

        index = 0
        while index < len(group):
            current = group[index]
            for other in events:
                if other.id not in claimed and events_overlap(current, other):
                    group.append(other)
                    claimed.add(other.id)
            index += 1

        groups.append(group)

    return groups


def group_overlapping_sweep(events: list[Event]) -> list[list[Event]]:
    """Sweep-line variant of :func:`group_overlapping` with the same partition.

    Events are visited by start time; a group closes as soon as the next start
    is at or after the running maximum end of the group.
    """

    if not events:
        return []

    ordered = sorted(events, key=lambda e: e.start_time)
    groups: list[list[Event]] = []
    current = [ordered[0]]
    group_end = ordered[0].end_time

    for event in ordered[1:]:
        if event.start_time < group_end:
            current.append(event)
            group_end = max(group_end, event.end_time)
        else:
            groups.append(current)
            current = [event]
            group_end = event.end_time

    groups.append(current)
    return groups
