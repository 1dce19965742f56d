"""View constants shared by the layout and rendering helpers."""

from __future__ import annotations

from dataclasses import dataclass

# --- Day/week time grid ---
DEFAULT_START_HOUR = 7
DEFAULT_VISIBLE_HOURS = 14
DEFAULT_PIXELS_PER_MINUTE = 1.0
DEFAULT_GUTTER_PCT = 1.0  # horizontal gap between side-by-side columns

# --- Month grid ---
MONTH_MAX_VISIBLE = 3
MONTH_GRID_DAYS = 42  # 6 weeks, Monday first

# --- Validation ---
DEFAULT_MIN_DURATION_MINUTES = 15


@dataclass(frozen=True)
class LayoutConfig:
    """Bundle of view settings passed from the presentation layer."""

    start_hour: int = DEFAULT_START_HOUR
    visible_hours: int = DEFAULT_VISIBLE_HOURS
    pixels_per_minute: float = DEFAULT_PIXELS_PER_MINUTE
    gutter_pct: float = DEFAULT_GUTTER_PCT
    month_max_visible: int = MONTH_MAX_VISIBLE
    min_duration_minutes: int = DEFAULT_MIN_DURATION_MINUTES

