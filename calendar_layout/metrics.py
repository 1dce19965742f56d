"""Summary statistics over a computed layout."""

from __future__ import annotations

from calendar_layout.grouping import group_overlapping
from calendar_layout.schema import PositionedEvent


def compute_layout_metrics(positioned: list[PositionedEvent]) -> dict:
    """Compute group, column and overlap counts for a laid-out event set."""

    if not positioned:
        return {
            "total_events": 0,
            "total_groups": 0,
            "max_columns": 0,
            "avg_columns": 0.0,
            "overlapping_events": 0,
        }

    groups = group_overlapping(sorted(positioned, key=lambda e: e.start_time))
    widths = [group[0].total_columns for group in groups]

    return {
        "total_events": len(positioned),
        "total_groups": len(groups),
        "max_columns": max(widths),
        "avg_columns": sum(widths) / len(widths),
        "overlapping_events": sum(1 for event in positioned if event.total_columns > 1),
    }
