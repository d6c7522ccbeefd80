"""
Agenda template scaling.

The reference agenda spans 4.5 hours. For an event of another length,
every phase boundary is multiplied by `duration_hours / 4.5`.

Two scaling modes exist:

- ``fractional``: boundaries are scaled as written (2.5 stays 2.5).
- ``truncated``: boundaries are cut to their whole hour before scaling,
  so the Break ends at hour 2 and the Workshop starts there. This is how
  agendas were generated historically and is kept for callers that need
  identical output.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Literal

from alumni_events.scheduling.intervals import comparable, validate_duration

ScalingMode = Literal["fractional", "truncated"]

TEMPLATE_SPAN_HOURS = 4.5

# (name, start hour, end hour, description)
REFERENCE_TEMPLATE = (
    ("Opening Ceremony", 0, 1, "Welcome speech and introductions"),
    ("Keynote Session", 1, 2, "Main presentation by keynote speaker"),
    ("Break", 2, 2.5, "Networking and refreshments"),
    ("Workshop Session", 2.5, 4, "Interactive workshop activities"),
    ("Closing Remarks", 4, 4.5, "Final thoughts and thank-yous"),
)


@dataclass
class TimelineEntry:
    name: str
    start_offset_hours: float
    end_offset_hours: float
    description: str
    start_time: datetime
    end_time: datetime

    @property
    def day(self) -> date:
        return self.start_time.date()


def _template_hour(hours: float, mode: ScalingMode) -> float:
    return float(int(hours)) if mode == "truncated" else float(hours)


def generate_timeline(
    event_start: datetime,
    duration_hours: float,
    mode: ScalingMode = "fractional",
) -> List[TimelineEntry]:
    validate_duration(duration_hours)
    scale = duration_hours / TEMPLATE_SPAN_HOURS

    entries: List[TimelineEntry] = []
    for name, start_h, end_h, description in REFERENCE_TEMPLATE:
        start_offset = _template_hour(start_h, mode) * scale
        end_offset = _template_hour(end_h, mode) * scale
        entries.append(
            TimelineEntry(
                name=name,
                start_offset_hours=start_offset,
                end_offset_hours=end_offset,
                description=description,
                start_time=event_start + timedelta(hours=start_offset),
                end_time=event_start + timedelta(hours=end_offset),
            )
        )
    return entries


def find_overruns(entries: List[TimelineEntry], event_end: datetime) -> List[str]:
    """Names of the phases that end after the event does."""
    overruns: List[str] = []
    for e in entries:
        end_time, end = comparable(e.end_time, event_end)
        if end_time > end:
            overruns.append(e.name)
    return overruns
