from typing import Iterable, List

from alumni_events.core.errors import InvalidArgumentError
from alumni_events.events.types import Event


def is_similar(source: Event, other: Event) -> bool:
    """Same category tag (untagged counts as a tag), or the other event's description mentions the source by name."""
    if other.major_id == source.major_id:
        return True
    return bool(source.name) and source.name in (other.description or "")


def find_similar(source_event_id: int, all_events: Iterable[Event], count: int) -> List[Event]:
    """
    Events similar to the source, latest start first, at most `count`.

    Returns an empty list when the source is not among `all_events`.
    """
    if count <= 0:
        raise InvalidArgumentError(f"count must be greater than 0, got {count}")

    events = list(all_events)
    source = next((e for e in events if e.id == source_event_id), None)
    if source is None:
        return []

    matches = [e for e in events if e.id != source.id and is_similar(source, e)]
    matches.sort(key=lambda e: e.start_time, reverse=True)
    return matches[:count]
