import tempfile
from datetime import date, datetime

from calendar_layout.config import LayoutConfig
from calendar_layout.schema import Event
from ui_demo_streamlit.app import _parse_uploaded, run_engine


class UploadedFile:
    def __init__(self, name, content):
        self.name = name
        self._content = content

    def getbuffer(self):
        return memoryview(self._content)


def test_overnight_event_does_not_narrow_next_day():
    events = [
        Event("mon", datetime(2025, 1, 6, 20, 30), datetime(2025, 1, 7, 8, 0)),
        Event("tue", datetime(2025, 1, 7, 7, 30), datetime(2025, 1, 7, 8, 30)),
    ]
    result = run_engine(events, date(2025, 1, 6), LayoutConfig(), now=datetime(2025, 1, 7, 9, 0))

    [(event, rect)] = result["rects_by_day"][date(2025, 1, 7)]
    assert event.id == "tue"
    assert (event.column, event.total_columns) == (0, 1)
    assert (rect.top, rect.height, rect.left_pct, rect.width_pct) == (30.0, 60.0, 0.5, 99.0)
    assert [e.id for e, _ in result["rects_by_day"][date(2025, 1, 6)]] == ["mon"]
    assert result["now_offset"] == 120.0


def test_metrics_are_reported_per_day():
    events = [
        Event("a", datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 10, 0)),
        Event("b", datetime(2025, 1, 6, 9, 30), datetime(2025, 1, 6, 10, 30)),
        Event("c", datetime(2025, 1, 7, 9, 0), datetime(2025, 1, 7, 10, 0)),
    ]
    metrics = run_engine(events, date(2025, 1, 6), LayoutConfig(), now=datetime(2025, 1, 1, 9, 0))["metrics"]
    assert len(metrics) == 7
    assert (metrics[0]["day"], metrics[0]["max_columns"]) == ("2025-01-06", 2)
    assert (metrics[1]["day"], metrics[1]["max_columns"]) == ("2025-01-07", 1)
    assert metrics[2]["total_events"] == 0


def test_uploaded_file_is_removed_after_parsing(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    content = b"id,start_time,end_time\na,2025-01-06T09:00:00,2025-01-06T10:00:00\n"
    events = _parse_uploaded(UploadedFile("events.csv", content))
    assert [e.id for e in events] == ["a"]
    assert list(tmp_path.iterdir()) == []
