import json
from pathlib import Path
from typing import Iterable, List, Optional

from alumni_events.core.config import DEFAULT_EVENT_DATA_PATH
from alumni_events.core.errors import NotFoundError
from alumni_events.events.types import Event
from alumni_events.observability.logger import log_warning


class InMemoryEventStore:
    """Event store over a fixed list of events, kept in the order given."""

    def __init__(self, events: Iterable[Event]) -> None:
        self._events: List[Event] = list(events)

    def fetch_events_by_organizer(self, organizer_id: int) -> List[Event]:
        return [e for e in self._events if e.organizer_id == organizer_id]

    def fetch_event_by_id(self, event_id: int) -> Event:
        for e in self._events:
            if e.id == event_id:
                return e
        raise NotFoundError(event_id)

    def fetch_all_events(self, major_id: Optional[int] = None) -> List[Event]:
        if major_id is None:
            return list(self._events)
        return [e for e in self._events if e.major_id == major_id]


class MockEventStore(InMemoryEventStore):
    """Event store backed by a JSON fixture file (`{"events": [...]}`)."""

    def __init__(self, data_path: Path | None = None) -> None:
        self._path = Path(data_path) if data_path else DEFAULT_EVENT_DATA_PATH
        super().__init__(self._load())

    def _load(self) -> List[Event]:
        if not self._path.exists():
            log_warning("Event fixture not found, starting with no events", {"path": str(self._path)})
            return []
        raw = json.loads(self._path.read_text(encoding="utf-8"))
        return [Event.model_validate(e) for e in raw.get("events", [])]
