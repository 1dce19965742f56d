"""CSV adapter for calendar events."""

from __future__ import annotations

import csv
import logging
from datetime import datetime

from calendar_layout.schema import Event
from calendar_layout.validation import validate_events

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "start_time", "end_time")


def _parse_timestamp(raw: str) -> datetime:
    # fromisoformat accepts a trailing "Z" only from Python 3.11.
    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _parse_row(row: dict, row_number: int) -> Event:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        start_time = _parse_timestamp(row["start_time"])
        end_time = _parse_timestamp(row["end_time"])
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed timestamp") from exc

    payload = {
        key: value.strip()
        for key, value in row.items()
        if key not in _REQUIRED_FIELDS and key is not None and value not in (None, "")
    }

    return Event(id=row["id"].strip(), start_time=start_time, end_time=end_time, payload=payload)


def parse(file_path: str) -> list[Event]:
    """Parse a CSV file into validated events; extra columns go to the payload."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        events = [_parse_row(row, row_number) for row_number, row in enumerate(reader, start=2)]

    logger.debug("Parsed %d events from %s", len(events), file_path)
    return validate_events(events)
