"""Layout engine facade: grouping followed by per-group column assignment."""

from __future__ import annotations

import logging
from typing import Callable

from calendar_layout.columns import assign_columns
from calendar_layout.grouping import group_overlapping
from calendar_layout.schema import Event, PositionedEvent

logger = logging.getLogger(__name__)

Grouper = Callable[[list[Event]], list[list[Event]]]


def layout(events: list[Event], grouper: Grouper = group_overlapping) -> list[PositionedEvent]:
    """Return the events annotated with ``column`` and ``total_columns``.

    Output order follows the overlap groups, not the input; reconcile by ``id``.
    """

    if not events:
        return []

    ordered = sorted(events, key=lambda e: e.start_time)
    groups = grouper(ordered)

    positioned: list[PositionedEvent] = []
    for group in groups:
        positioned.extend(assign_columns(group))

    logger.debug(
        "Laid out %d events in %d groups (widest group: %d columns)",
        len(positioned),
        len(groups),
        max(event.total_columns for event in positioned),
    )
    return positioned
