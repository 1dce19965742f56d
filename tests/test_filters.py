from datetime import datetime

from calendar_layout.filters import filter_events
from calendar_layout.schema import Event

START = datetime.fromisoformat("2025-01-06T09:00:00")
END = datetime.fromisoformat("2025-01-06T10:00:00")


def sample_events():
    return [
        Event("a", START, END, {"therapistId": "t1", "type": "aba"}),
        Event("b", START, END, {"therapistId": "t2", "type": "speech"}),
        Event("c", START, END, {"therapistId": "t1", "type": "speech"}),
        Event("d", START, END, {}),
    ]


def test_no_selection_keeps_everything():
    assert [e.id for e in filter_events(sample_events())] == ["a", "b", "c", "d"]
    assert [e.id for e in filter_events(sample_events(), therapists=[], event_types=[])] == ["a", "b", "c", "d"]


def test_filter_by_therapist_and_type():
    assert [e.id for e in filter_events(sample_events(), therapists=["t1"])] == ["a", "c"]
    assert [e.id for e in filter_events(sample_events(), event_types=["speech"])] == ["b", "c"]
    assert [e.id for e in filter_events(sample_events(), therapists=["t1"], event_types=["speech"])] == ["c"]
