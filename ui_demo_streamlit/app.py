"""Streamlit demo UI for calendar-layout."""

from __future__ import annotations

import os
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

from calendar_layout.adapters import csv_adapter, json_adapter
from calendar_layout.buckets import bucket_by_day, events_for_day
from calendar_layout.config import LayoutConfig
from calendar_layout.filters import filter_events
from calendar_layout.geometry import (
    TimeGridWindow,
    map_month_cell,
    map_time_grid,
    now_indicator_offset,
    visible_in_window,
    week_days,
)
from calendar_layout.layout import layout
from calendar_layout.metrics import compute_layout_metrics


def _parse_events_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_events_from_path(temp_path)
    finally:
        os.unlink(temp_path)


def _split_ids(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def run_engine(events: list, anchor: date, config: LayoutConfig, now: datetime) -> dict[str, Any]:
    """Lay out each day of the week around ``anchor`` and return a UI-friendly payload.

    Each day column is laid out separately; an event running past midnight
    never joins the next day's overlap groups.
    """

    window = TimeGridWindow.from_config(config)
    days = week_days(anchor)
    week_events = [e for e in events if e.start_time.date() in days]

    rects_by_day: dict[date, list] = {}
    metrics_by_day = []
    for day in days:
        positioned = layout(visible_in_window(events_for_day(week_events, day), window))
        rects_by_day[day] = [(event, map_time_grid(event, window)) for event in positioned]
        metrics_by_day.append({"day": day.isoformat(), **compute_layout_metrics(positioned)})

    buckets = bucket_by_day(week_events)
    return {
        "days": days,
        "window_height": window.height,
        "rects_by_day": rects_by_day,
        "now_day": now.date(),
        "now_offset": now_indicator_offset(now, window) if now.date() in days else None,
        "month_cells": [map_month_cell(day, buckets.get(day, []), config.month_max_visible) for day in days],
        "metrics": metrics_by_day,
    }


def _render_day_column(day: date, items: list, height: float, now_day: date, now_offset) -> str:
    blocks = []
    for event, rect in items:
        title = event.payload.get("title", event.id)
        blocks.append(
            f'<div style="position:absolute;top:{rect.top}px;height:{rect.height}px;'
            f"left:{rect.left_pct}%;width:{rect.width_pct}%;background:#dbeafe;"
            f'border-left:3px solid #2563eb;font-size:11px;overflow:hidden;">'
            f"{title}<br>{event.start_time:%H:%M}</div>"
        )
    if now_offset is not None and day == now_day:
        blocks.append(f'<div style="position:absolute;top:{now_offset}px;left:0;right:0;border-top:2px solid #ef4444;"></div>')
    return (
        f'<div style="flex:1;border-right:1px solid #e5e5e5;">'
        f'<div style="text-align:center;font-weight:600;">{day:%a %d}</div>'
        f'<div style="position:relative;height:{height}px;">{"".join(blocks)}</div></div>'
    )


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Calendar Layout Demo", layout="wide")
    st.title("Calendar Layout - Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload events", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        anchor = st.date_input("Week of", value=date(2025, 1, 6))
        start_hour = st.slider("Window start", min_value=0, max_value=12, value=7)
        visible_hours = st.slider("Visible hours", min_value=4, max_value=24 - start_hour, value=min(14, 24 - start_hour))
        therapists = st.text_input("Therapist ids (comma separated)", value="")
        event_types = st.text_input("Event types (comma separated)", value="")
        max_visible = st.number_input("Month preview size", min_value=1, max_value=10, value=3, step=1)
        run = st.button("Lay out", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Lay out**.")
        return

    try:
        if use_demo:
            events = csv_adapter.parse("examples/sample_dataset.csv")
        elif uploaded is not None:
            events = _parse_uploaded(uploaded)
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo dataset'.")
            return

        events = filter_events(events, therapists=_split_ids(therapists), event_types=_split_ids(event_types))

        config = LayoutConfig(start_hour=int(start_hour), visible_hours=int(visible_hours), month_max_visible=int(max_visible))
        result = run_engine(events, anchor, config, now=datetime.now())

        st.subheader("A) Week View")
        columns_html = "".join(
            _render_day_column(day, result["rects_by_day"].get(day, []), result["window_height"], result["now_day"], result["now_offset"])
            for day in result["days"]
        )
        st.markdown(f'<div style="display:flex;">{columns_html}</div>', unsafe_allow_html=True)

        st.subheader("B) Month Previews")
        for cell in result["month_cells"]:
            titles = [e.payload.get("title", e.id) for e in cell.visible]
            st.write(f"{cell.day:%a %d %b}: {', '.join(titles) or '-'} {cell.more_label or ''}")

        st.subheader("C) Layout Metrics")
        st.table(result["metrics"])

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while laying out events. Please verify the input format.")


if __name__ == "__main__":
    main()
