from datetime import date, datetime

from calendar_layout.config import LayoutConfig
from calendar_layout.geometry import (
    TimeGridWindow,
    in_time_grid,
    map_month_cell,
    map_time_grid,
    month_grid_days,
    now_indicator_offset,
    visible_in_window,
    week_days,
)
from calendar_layout.schema import Event, PositionedEvent


def evt(event_id, start, end):
    return Event(event_id, datetime.fromisoformat(f"2025-01-06T{start}:00"), datetime.fromisoformat(f"2025-01-06T{end}:00"))


def test_time_grid_rect_for_second_column():
    event = PositionedEvent.from_event(evt("b", "09:30", "10:30"), column=1, total_columns=2)
    rect = map_time_grid(event, TimeGridWindow())
    assert rect.event_id == "b"
    assert rect.top == 150.0
    assert rect.height == 60.0
    assert rect.left_pct == 50.5
    assert rect.width_pct == 49.0


def test_time_grid_scales_with_pixels_per_minute():
    event = PositionedEvent.from_event(evt("a", "07:00", "08:00"), column=0, total_columns=1)
    rect = map_time_grid(event, TimeGridWindow(pixels_per_minute=2.0, gutter_pct=0.0))
    assert (rect.top, rect.height, rect.left_pct, rect.width_pct) == (0.0, 120.0, 0.0, 100.0)


def test_window_filter_drops_events_outside_grid():
    window = TimeGridWindow()
    early = evt("early", "06:30", "07:30")
    inside = evt("inside", "20:59", "21:30")
    late = evt("late", "21:00", "22:00")
    assert not in_time_grid(early, window)
    assert in_time_grid(inside, window)
    assert [e.id for e in visible_in_window([early, inside, late], window)] == ["inside"]


def test_now_indicator():
    window = TimeGridWindow()
    assert now_indicator_offset(datetime(2025, 1, 6, 8, 15), window) == 75.0
    assert now_indicator_offset(datetime(2025, 1, 6, 6, 59), window) is None
    assert now_indicator_offset(datetime(2025, 1, 6, 21, 0), window) is None


def test_month_cell_truncation():
    bucket = [evt(f"e{i}", f"{9 + i:02d}:00", f"{9 + i:02d}:30") for i in range(6)]
    cell = map_month_cell(date(2025, 1, 6), list(reversed(bucket)), max_visible=3)
    assert [e.id for e in cell.visible] == ["e0", "e1", "e2"]
    assert cell.hidden_count == 3
    assert cell.more_label == "+3 more"


def test_month_cell_without_overflow():
    cell = map_month_cell(date(2025, 1, 6), [evt("a", "09:00", "10:00")])
    assert cell.hidden_count == 0
    assert cell.more_label is None


def test_week_and_month_grids_start_on_monday():
    days = week_days(date(2025, 1, 8))
    assert days[0] == date(2025, 1, 6)
    assert days[-1] == date(2025, 1, 12)

    grid = month_grid_days(date(2025, 1, 15))
    assert len(grid) == 42
    assert grid[0] == date(2024, 12, 30)
    assert grid[-1] == date(2025, 2, 9)


def test_window_from_config():
    window = TimeGridWindow.from_config(LayoutConfig(start_hour=8, visible_hours=10))
    assert window.start_of(date(2025, 1, 6)) == datetime(2025, 1, 6, 8, 0)
    assert window.end_of(date(2025, 1, 6)) == datetime(2025, 1, 6, 18, 0)
    assert window.height == 600.0
