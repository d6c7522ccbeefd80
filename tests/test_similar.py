from datetime import datetime

import pytest

from alumni_events.core.errors import InvalidArgumentError
from alumni_events.events.types import Event
from alumni_events.scheduling.similar import find_similar


def make_event(event_id, major_id, day, name=None, description=None):
    return Event(
        id=event_id,
        organizer_id=1,
        major_id=major_id,
        name=name or f"Event {event_id}",
        start_time=datetime(2025, 1, day, 10, 0),
        end_time=datetime(2025, 1, day, 12, 0),
        description=description,
    )


EVENTS = [
    make_event(1, 5, 10, name="Data Science Summit"),
    make_event(2, 5, 3),
    make_event(3, 6, 20, description="Recap of the Data Science Summit"),
    make_event(4, 7, 25),
    make_event(5, 5, 15),
    make_event(6, None, 28),
]


def test_matches_category_or_name_mention_latest_first():
    result = find_similar(1, EVENTS, 10)
    assert [e.id for e in result] == [3, 5, 2]


def test_source_event_is_excluded():
    assert all(e.id != 1 for e in find_similar(1, EVENTS, 10))


def test_count_truncates():
    assert [e.id for e in find_similar(1, EVENTS, 2)] == [3, 5]


def test_missing_source_returns_empty():
    assert find_similar(99, EVENTS, 3) == []


def test_untagged_events_share_the_missing_category():
    events = EVENTS + [make_event(7, None, 29)]
    assert [e.id for e in find_similar(6, events, 10)] == [7]


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_is_rejected(count):
    with pytest.raises(InvalidArgumentError):
        find_similar(1, EVENTS, count)
