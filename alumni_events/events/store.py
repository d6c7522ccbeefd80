from typing import List, Optional, Protocol

from alumni_events.core.config import load_config
from alumni_events.events.types import Event


class EventStore(Protocol):
    def fetch_events_by_organizer(self, organizer_id: int) -> List[Event]:
        """Return every event owned by the organizer, in store order."""
        ...

    def fetch_event_by_id(self, event_id: int) -> Event:
        """
        Return one event.

        Raises NotFoundError when no event has the given id.
        """
        ...

    def fetch_all_events(self, major_id: Optional[int] = None) -> List[Event]:
        """Return all events, optionally restricted to one category tag."""
        ...


def select_event_store() -> EventStore:
    """Factory function to select the event store based on EVENT_STORE env var."""
    cfg = load_config()

    if cfg.event_store == "mock":
        from alumni_events.events.mock_store import MockEventStore
        return MockEventStore(cfg.event_data_path)
    elif cfg.event_store == "memory":
        from alumni_events.events.mock_store import InMemoryEventStore
        return InMemoryEventStore([])
    else:
        raise ValueError(f"Unsupported EVENT_STORE: {cfg.event_store}")
