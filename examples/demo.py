"""Demo script for calendar-layout."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from calendar_layout.adapters.csv_adapter import parse
from calendar_layout.buckets import bucket_by_day, events_for_day
from calendar_layout.config import LayoutConfig
from calendar_layout.filters import filter_events
from calendar_layout.geometry import TimeGridWindow, map_month_cell, map_time_grid, visible_in_window
from calendar_layout.layout import layout
from calendar_layout.metrics import compute_layout_metrics


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s - %(message)s")
    config = LayoutConfig()
    window = TimeGridWindow.from_config(config)

    events = parse("examples/sample_dataset.csv")
    events = filter_events(events, event_types=["aba", "speech", "ot", "parent", "evaluation", "meeting"])

    buckets = bucket_by_day(events)
    for day in sorted(buckets):
        positioned = layout(visible_in_window(events_for_day(events, day), window))
        for event in sorted(positioned, key=lambda e: e.start_time):
            print(event.id, event.payload.get("title"), map_time_grid(event, window))
        print(day.isoformat(), "metrics:", compute_layout_metrics(positioned))

    for day, bucket in sorted(buckets.items()):
        cell = map_month_cell(day, bucket, max_visible=config.month_max_visible)
        print(day.isoformat(), [e.id for e in cell.visible], cell.more_label or "")


if __name__ == "__main__":
    main()
