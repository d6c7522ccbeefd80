import logging
from datetime import datetime
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from alumni_events.core.config import load_config
from alumni_events.events.store import EventStore, select_event_store
from alumni_events.events.types import Event
from alumni_events.observability.logger import log_error, log_event, timing
from alumni_events.scheduling.best_time import SuggestedTimeResult, find_best_time
from alumni_events.scheduling.conflicts import has_conflict
from alumni_events.scheduling.intervals import as_zone, validate_interval
from alumni_events.scheduling.popularity import PopularityResult, rank_by_popularity
from alumni_events.scheduling.similar import find_similar
from alumni_events.scheduling.timeline import ScalingMode, TimelineEntry, find_overruns, generate_timeline

logger = logging.getLogger(__name__)


class SchedulingService:
    """
    Stateless entry points of the scheduling and recommendation engine.

    Each call reads what it needs from the event store and computes the
    answer; nothing is cached between calls, so one instance may serve
    concurrent requests.
    """

    def __init__(
        self,
        store: EventStore,
        timezone: Optional[str] = None,
        now: Optional[Callable[[], datetime]] = None,
        timeline_scaling: Optional[ScalingMode] = None,
    ):
        cfg = load_config()
        self._store = store
        self._tz = ZoneInfo(timezone or cfg.timezone)
        self._now = now
        self._timeline_scaling: ScalingMode = timeline_scaling or cfg.timeline_scaling

    @property
    def timeline_scaling(self) -> ScalingMode:
        return self._timeline_scaling

    def now(self) -> datetime:
        if self._now is not None:
            return as_zone(self._now(), self._tz)
        return datetime.now(self._tz)

    def suggest_best_time(self, organizer_id: int, duration_hours: float) -> SuggestedTimeResult:
        try:
            with timing("suggest_best_time") as timer:
                events = self._store.fetch_events_by_organizer(organizer_id)
                result = find_best_time(organizer_id, duration_hours, events, self.now())
        except Exception as e:
            log_error(e, {"operation": "suggest_best_time", "organizer_id": organizer_id})
            raise

        log_event(
            action="suggested" if result.found else "no_slot",
            operation="suggest_best_time",
            duration_ms=timer.get_duration_ms(),
            organizer_id=organizer_id,
            duration_hours=duration_hours,
            existing_events=len(events),
            score=result.score,
            alternatives=len(result.alternatives),
        )
        return result

    def check_conflict(self, event_id: int, new_start: datetime, new_end: datetime) -> bool:
        try:
            with timing("check_conflict") as timer:
                start = as_zone(new_start, self._tz)
                end = as_zone(new_end, self._tz)
                validate_interval(start, end)
                event = self._store.fetch_event_by_id(event_id)
                siblings = self._store.fetch_events_by_organizer(event.organizer_id)
                conflict = has_conflict(event.organizer_id, event.id, start, end, siblings)
        except Exception as e:
            log_error(e, {"operation": "check_conflict", "event_id": event_id})
            raise

        log_event(
            action="checked",
            operation="check_conflict",
            duration_ms=timer.get_duration_ms(),
            event_id=event_id,
            organizer_id=event.organizer_id,
            conflict=conflict,
        )
        return conflict

    def get_similar_events(self, event_id: int, count: int = 3) -> List[Event]:
        try:
            with timing("get_similar_events") as timer:
                source = self._store.fetch_event_by_id(event_id)
                candidates = self._store.fetch_all_events()
                if all(e.id != source.id for e in candidates):
                    candidates = [source, *candidates]
                similar = find_similar(source.id, candidates, count)
        except Exception as e:
            log_error(e, {"operation": "get_similar_events", "event_id": event_id})
            raise

        log_event(
            action="matched",
            operation="get_similar_events",
            duration_ms=timer.get_duration_ms(),
            event_id=event_id,
            candidates=len(candidates),
            returned=len(similar),
        )
        return similar

    def get_events_by_popularity(self, top: int = 10, major_id: Optional[int] = None) -> List[PopularityResult]:
        try:
            with timing("get_events_by_popularity") as timer:
                events = self._store.fetch_all_events(major_id)
                ranked = rank_by_popularity(events, top, self.now())
        except Exception as e:
            log_error(e, {"operation": "get_events_by_popularity", "top": top})
            raise

        log_event(
            action="ranked",
            operation="get_events_by_popularity",
            duration_ms=timer.get_duration_ms(),
            top=top,
            major_id=major_id,
            returned=len(ranked),
        )
        return ranked

    def get_suggested_timeline(
        self,
        event_start: datetime,
        duration_hours: float,
        event_end: Optional[datetime] = None,
    ) -> tuple[List[TimelineEntry], List[str]]:
        """
        Build the scaled agenda for an event.

        Returns the entries and, when `event_end` is given, the names of the
        phases that run past it.
        """
        try:
            start = as_zone(event_start, self._tz)
            entries = generate_timeline(start, duration_hours, self._timeline_scaling)
            overruns: List[str] = []
            if event_end is not None:
                end = as_zone(event_end, self._tz)
                validate_interval(start, end)
                overruns = find_overruns(entries, end)
        except Exception as e:
            log_error(e, {"operation": "get_suggested_timeline", "duration_hours": duration_hours})
            raise

        if overruns:
            logger.info(f"Timeline phases overrun event end: {', '.join(overruns)}")
        log_event(
            action="generated",
            operation="get_suggested_timeline",
            duration_hours=duration_hours,
            scaling=self._timeline_scaling,
            entries=len(entries),
            overruns=len(overruns),
        )
        return entries, overruns


def get_scheduling_service() -> SchedulingService:
    """Build a service over the configured event store."""
    return SchedulingService(select_event_store())
