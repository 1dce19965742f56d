"""JSON adapter for calendar events."""

from __future__ import annotations

import json
import logging
from datetime import datetime

from calendar_layout.schema import Event
from calendar_layout.validation import validate_events

logger = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "start_time": ("startTime", "start_time"),
    "end_time": ("endTime", "end_time"),
}
_RESERVED = {"id", "startTime", "start_time", "endTime", "end_time"}


def _parse_timestamp(raw) -> datetime:
    # fromisoformat accepts a trailing "Z" only from Python 3.11.
    value = str(raw).strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _lookup(item: dict, field: str):
    for key in _FIELD_ALIASES[field]:
        if item.get(key):
            return item[key]
    return None


def _parse_item(item: dict, index: int) -> Event:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    raw_start = _lookup(item, "start_time")
    raw_end = _lookup(item, "end_time")
    missing = [name for name, value in (("id", item.get("id")), ("start_time", raw_start), ("end_time", raw_end)) if not value]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        start_time = _parse_timestamp(raw_start)
        end_time = _parse_timestamp(raw_end)
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed timestamp") from exc

    payload = {key: value for key, value in item.items() if key not in _RESERVED}
    return Event(id=str(item["id"]).strip(), start_time=start_time, end_time=end_time, payload=payload)


def parse(file_path: str) -> list[Event]:
    """Parse a JSON list of event objects into validated events."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    events = [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
    logger.debug("Parsed %d events from %s", len(events), file_path)
    return validate_events(events)
