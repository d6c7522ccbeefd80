from datetime import datetime
from typing import Iterable, Optional

from alumni_events.events.types import Event
from alumni_events.scheduling.intervals import comparable, overlaps

# Passed as `exclude_event_id` when checking a brand-new event
NEW_EVENT: Optional[int] = None


def has_conflict(
    organizer_id: int,
    exclude_event_id: Optional[int],
    candidate_start: datetime,
    candidate_end: datetime,
    existing_events: Iterable[Event],
) -> bool:
    """
    Return True if any other event of `organizer_id` overlaps the candidate interval.

    The event being rescheduled (`exclude_event_id`) is ignored; pass
    NEW_EVENT when the candidate is not an existing event. Naive times are
    read as wall-clock time in the zone of the aware side.
    """
    for ev in existing_events:
        if ev.organizer_id != organizer_id:
            continue
        if exclude_event_id is not None and ev.id == exclude_event_id:
            continue
        start, ev_start = comparable(candidate_start, ev.start_time)
        end, ev_end = comparable(candidate_end, ev.end_time)
        if overlaps(start, end, ev_start, ev_end):
            return True
    return False
