from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

from alumni_events.events.types import Event


class SlotModel(BaseModel):
    start: datetime
    end: datetime
    score: int


class SuggestedTimeResponse(BaseModel):
    ok: bool = True
    organizer_id: int
    duration_hours: float
    suggested: Optional[SlotModel] = None
    score: int = 0
    alternatives: List[SlotModel] = []
    message: Optional[str] = None


class ConflictCheckResponse(BaseModel):
    ok: bool = True
    event_id: int
    new_start: datetime
    new_end: datetime
    has_conflict: bool


class SimilarEventsResponse(BaseModel):
    ok: bool = True
    event_id: int
    events: List[Event]


class PopularityItem(BaseModel):
    event_id: int
    name: str
    participant_count: int
    score: float


class PopularityResponse(BaseModel):
    ok: bool = True
    top: int
    events: List[PopularityItem]


class TimelineEntryModel(BaseModel):
    name: str
    day: date
    start_time: datetime
    end_time: datetime
    start_offset_hours: float
    end_offset_hours: float
    description: str


class TimelineResponse(BaseModel):
    ok: bool = True
    event_start: datetime
    duration_hours: float
    scaling: Literal["fractional", "truncated"]
    timeline: List[TimelineEntryModel]
    fits_event: Optional[bool] = None  # only known when event_end was given
    overruns: List[str] = []
