"""
Half-open `[start, end)` interval tests.

Overlap rule:
    a_start < b_end AND a_end > b_start

Intervals that only touch (one ends exactly when the other starts) do not
overlap.
"""

import math
from datetime import datetime, tzinfo
from typing import Optional

from alumni_events.core.errors import InvalidIntervalError

# One year; keeps every derived timedelta in range
MAX_DURATION_HOURS = 24 * 365


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    return a_start < b_end and a_end > b_start


def contains(outer_start: datetime, outer_end: datetime, inner_start: datetime, inner_end: datetime) -> bool:
    """True if `[inner_start, inner_end)` lies entirely inside `[outer_start, outer_end)`."""
    return outer_start <= inner_start and inner_end <= outer_end


def validate_interval(start: datetime, end: datetime) -> None:
    if end <= start:
        raise InvalidIntervalError(f"Interval end {end.isoformat()} must be after start {start.isoformat()}")


def validate_duration(duration_hours: float) -> None:
    if not math.isfinite(duration_hours) or duration_hours <= 0:
        raise InvalidIntervalError(f"duration_hours must be a positive number, got {duration_hours}")
    if duration_hours > MAX_DURATION_HOURS:
        raise InvalidIntervalError(
            f"duration_hours must be at most {MAX_DURATION_HOURS}, got {duration_hours}"
        )


def as_zone(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    """
    Express `dt` in `tz` so it can be compared with values built in `tz`.

    Naive datetimes are read as wall-clock time in `tz`.
    """
    if tz is None:
        return dt
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def comparable(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """
    Return `a` and `b` so they can be compared.

    When only one of them carries a zone, the naive one is read as
    wall-clock time in that zone.
    """
    if a.tzinfo is None and b.tzinfo is not None:
        return a.replace(tzinfo=b.tzinfo), b
    if a.tzinfo is not None and b.tzinfo is None:
        return a, b.replace(tzinfo=a.tzinfo)
    return a, b
