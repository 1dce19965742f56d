"""Pure geometry helpers mapping positioned events to view rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from calendar_layout.config import (
    DEFAULT_GUTTER_PCT,
    DEFAULT_PIXELS_PER_MINUTE,
    DEFAULT_START_HOUR,
    DEFAULT_VISIBLE_HOURS,
    MONTH_GRID_DAYS,
    MONTH_MAX_VISIBLE,
    LayoutConfig,
)
from calendar_layout.schema import Event, PositionedEvent


@dataclass(frozen=True)
class TimeGridWindow:
    """Fixed visible window of a day/week view, e.g. 07:00 for 14 hours."""

    start_hour: int = DEFAULT_START_HOUR
    hours: int = DEFAULT_VISIBLE_HOURS
    pixels_per_minute: float = DEFAULT_PIXELS_PER_MINUTE
    gutter_pct: float = DEFAULT_GUTTER_PCT

    @classmethod
    def from_config(cls, config: LayoutConfig) -> "TimeGridWindow":
        return cls(
            start_hour=config.start_hour,
            hours=config.visible_hours,
            pixels_per_minute=config.pixels_per_minute,
            gutter_pct=config.gutter_pct,
        )

    def start_of(self, day: date, tzinfo=None) -> datetime:
        return datetime.combine(day, time(self.start_hour), tzinfo=tzinfo)

    def end_of(self, day: date, tzinfo=None) -> datetime:
        return self.start_of(day, tzinfo) + timedelta(hours=self.hours)

    @property
    def height(self) -> float:
        return self.hours * 60 * self.pixels_per_minute


@dataclass(frozen=True)
class EventRect:
    """Placement of one event: pixels vertically, percent of the day column horizontally."""

    event_id: str
    top: float
    height: float
    left_pct: float
    width_pct: float


@dataclass
class MonthCell:
    """Compact month-grid preview of one day."""

    day: date
    visible: list[Event]
    hidden_count: int

    @property
    def more_label(self) -> Optional[str]:
        return f"+{self.hidden_count} more" if self.hidden_count else None


def _minutes(delta: timedelta) -> float:
    return delta.total_seconds() / 60.0


def in_time_grid(event: Event, window: TimeGridWindow) -> bool:
    """True when the event start lies within the window of its own day."""

    day = event.start_time.date()
    tzinfo = event.start_time.tzinfo
    return window.start_of(day, tzinfo) <= event.start_time < window.end_of(day, tzinfo)


def visible_in_window(events: list[Event], window: TimeGridWindow) -> list[Event]:
    return [event for event in events if in_time_grid(event, window)]


def map_time_grid(event: PositionedEvent, window: TimeGridWindow) -> EventRect:
    """Compute the rectangle of a positioned event on the day/week grid.

    Events outside the window must be dropped with :func:`visible_in_window`
    beforehand; no clamping happens here.
    """

    window_start = window.start_of(event.start_time.date(), event.start_time.tzinfo)
    column_width = 100.0 / event.total_columns

    return EventRect(
        event_id=event.id,
        top=_minutes(event.start_time - window_start) * window.pixels_per_minute,
        height=_minutes(event.duration) * window.pixels_per_minute,
        left_pct=event.column * column_width + window.gutter_pct / 2,
        width_pct=column_width - window.gutter_pct,
    )


def now_indicator_offset(now: datetime, window: TimeGridWindow) -> Optional[float]:
    """Vertical offset of the live "now" line, or None outside the window."""

    window_start = window.start_of(now.date(), now.tzinfo)
    if not window_start <= now < window.end_of(now.date(), now.tzinfo):
        return None
    return _minutes(now - window_start) * window.pixels_per_minute


def map_month_cell(day: date, bucket: list[Event], max_visible: int = MONTH_MAX_VISIBLE) -> MonthCell:
    ordered = sorted(bucket, key=lambda e: e.start_time)
    return MonthCell(
        day=day,
        visible=ordered[:max_visible],
        hidden_count=max(0, len(ordered) - max_visible),
    )


def week_days(anchor: date) -> list[date]:
    """Monday-first week containing ``anchor``."""

    monday = anchor - timedelta(days=anchor.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]


def month_grid_days(anchor: date) -> list[date]:
    """Six-week Monday-first grid covering the month of ``anchor``."""

    first = anchor.replace(day=1)
    grid_start = first - timedelta(days=first.weekday())
    return [grid_start + timedelta(days=offset) for offset in range(MONTH_GRID_DAYS)]
