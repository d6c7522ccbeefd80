from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List

from alumni_events.core.errors import InvalidArgumentError
from alumni_events.events.types import Event
from alumni_events.scheduling.intervals import comparable

FAR_FUTURE_DAYS = 30
FAR_FUTURE_FACTOR = 1.2


@dataclass
class PopularityResult:
    """Popularity of one event; derived per call, never persisted."""
    event_id: int
    name: str
    participant_count: int
    score: float


def time_factor(start_time: datetime, now: datetime) -> float:
    start, now = comparable(start_time, now)
    days_until = (start - now).total_seconds() / 86400
    return FAR_FUTURE_FACTOR if days_until > FAR_FUTURE_DAYS else 1.0


def popularity_score(event: Event, now: datetime) -> float:
    return event.participant_count * time_factor(event.start_time, now)


def rank_by_popularity(events: Iterable[Event], top_n: int, now: datetime) -> List[PopularityResult]:
    """
    Rank events by popularity score, highest first, keeping at most `top_n`.

    Equal scores keep the order the events were given in.
    """
    if top_n <= 0:
        raise InvalidArgumentError(f"top must be greater than 0, got {top_n}")

    results = [
        PopularityResult(
            event_id=e.id,
            name=e.name,
            participant_count=e.participant_count,
            score=popularity_score(e, now),
        )
        for e in events
    ]
    results.sort(key=lambda r: r.score, reverse=True)
    return results[:top_n]
