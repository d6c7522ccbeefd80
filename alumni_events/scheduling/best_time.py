"""
Best-time-slot search for a new event.

Candidates are generated on weekdays over a 30-day horizon that starts a
week from now, at 09:00, 11:00, 13:00, 15:00 and 17:00 local wall-clock
time. Candidates overlapping one of the organizer's events are discarded;
the rest are scored by start hour.
"""

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional

from alumni_events.events.types import Event
from alumni_events.scheduling.conflicts import NEW_EVENT, has_conflict
from alumni_events.scheduling.intervals import validate_duration
from alumni_events.scheduling.scoring import score_hour

HORIZON_LEAD_DAYS = 7
HORIZON_DAYS = 30
CANDIDATE_HOURS = range(9, 18, 2)  # 9, 11, 13, 15, 17
ALTERNATIVE_RATIO = 0.8
MAX_ALTERNATIVES = 3


@dataclass
class Slot:
    """A candidate `[start, end)` interval and its score."""
    start: datetime
    end: datetime
    score: int


@dataclass
class SuggestedTimeResult:
    """
    Outcome of a best-time search.

    `suggested` is None when every candidate conflicted; callers must check
    `found` before using it.
    """
    suggested: Optional[Slot] = None
    score: int = 0
    alternatives: List[Slot] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.suggested is not None


def candidate_days(now: datetime) -> List[datetime]:
    """Weekday dates of the horizon, as midnight datetimes in `now`'s zone."""
    first = now + timedelta(days=HORIZON_LEAD_DAYS)
    days: List[datetime] = []
    for offset in range(HORIZON_DAYS):
        day = first + timedelta(days=offset)
        if day.weekday() >= 5:  # Saturday, Sunday
            continue
        days.append(datetime.combine(day.date(), time(0, 0), tzinfo=now.tzinfo))
    return days


def generate_candidates(now: datetime, duration_hours: float) -> List[Slot]:
    """All candidate slots in ascending start order, scored but not yet filtered."""
    duration = timedelta(hours=duration_hours)
    slots: List[Slot] = []
    for day in candidate_days(now):
        for hour in CANDIDATE_HOURS:
            start = day.replace(hour=hour)
            slots.append(Slot(start=start, end=start + duration, score=score_hour(hour)))
    return slots


def find_best_time(
    organizer_id: int,
    duration_hours: float,
    organizer_events: Iterable[Event],
    now: datetime,
) -> SuggestedTimeResult:
    validate_duration(duration_hours)
    events = list(organizer_events)

    free = [
        slot for slot in generate_candidates(now, duration_hours)
        if not has_conflict(organizer_id, NEW_EVENT, slot.start, slot.end, events)
    ]
    if not free:
        return SuggestedTimeResult()

    # max() keeps the first maximal slot, i.e. the earliest one
    best = max(free, key=lambda s: s.score)
    threshold = best.score * ALTERNATIVE_RATIO

    near_best = [s for s in free if s is not best and s.score >= threshold]
    near_best.sort(key=lambda s: s.score, reverse=True)

    return SuggestedTimeResult(
        suggested=best,
        score=best.score,
        alternatives=near_best[:MAX_ALTERNATIVES],
    )
