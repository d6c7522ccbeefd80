from datetime import datetime

import pytest

from alumni_events.events.types import Event
from alumni_events.scheduling.conflicts import NEW_EVENT, has_conflict


def make_event(event_id, start, end, organizer_id=10):
    return Event(id=event_id, organizer_id=organizer_id, name=f"Event {event_id}", start_time=start, end_time=end)


EXISTING = [make_event(1, datetime(2025, 1, 10, 10, 0), datetime(2025, 1, 10, 12, 0))]


def test_candidate_starting_inside_existing_event_conflicts():
    assert has_conflict(10, NEW_EVENT, datetime(2025, 1, 10, 11, 0), datetime(2025, 1, 10, 13, 0), EXISTING) is True


def test_candidate_touching_existing_event_does_not_conflict():
    assert has_conflict(10, NEW_EVENT, datetime(2025, 1, 10, 12, 0), datetime(2025, 1, 10, 13, 0), EXISTING) is False
    assert has_conflict(10, NEW_EVENT, datetime(2025, 1, 10, 9, 0), datetime(2025, 1, 10, 10, 0), EXISTING) is False


@pytest.mark.parametrize("start_hour, end_hour", [(0, 1), (9, 18), (12, 13), (23, 24)])
def test_no_existing_events_never_conflict(start_hour, end_hour):
    start = datetime(2025, 1, 10, start_hour, 0)
    end = datetime(2025, 1, 10, end_hour - 1, 59)
    assert has_conflict(10, NEW_EVENT, start, end, []) is False


def test_rescheduled_event_is_excluded():
    candidate = (datetime(2025, 1, 10, 11, 0), datetime(2025, 1, 10, 13, 0))
    assert has_conflict(10, 1, *candidate, EXISTING) is False


def test_other_organizers_events_are_ignored():
    events = [make_event(2, datetime(2025, 1, 10, 10, 0), datetime(2025, 1, 10, 12, 0), organizer_id=99)]
    assert has_conflict(10, NEW_EVENT, datetime(2025, 1, 10, 11, 0), datetime(2025, 1, 10, 13, 0), events) is False


def test_any_overlapping_event_is_enough():
    events = EXISTING + [make_event(2, datetime(2025, 1, 10, 14, 0), datetime(2025, 1, 10, 16, 0))]
    assert has_conflict(10, 1, datetime(2025, 1, 10, 10, 0), datetime(2025, 1, 10, 15, 0), events) is True


def test_naive_candidate_against_aware_events():
    from zoneinfo import ZoneInfo

    tz = ZoneInfo("Asia/Ho_Chi_Minh")
    events = [make_event(1, datetime(2025, 1, 10, 10, 0, tzinfo=tz), datetime(2025, 1, 10, 12, 0, tzinfo=tz))]
    assert has_conflict(10, NEW_EVENT, datetime(2025, 1, 10, 11, 0), datetime(2025, 1, 10, 13, 0), events) is True
    assert has_conflict(10, NEW_EVENT, datetime(2025, 1, 10, 12, 0), datetime(2025, 1, 10, 13, 0), events) is False
