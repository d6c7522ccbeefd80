from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Event(BaseModel):
    """
    An alumni event as read from the event store.

    The scheduling engine never mutates these records; `participant_count`
    is derived by the store from join/leave records.
    """

    id: int
    organizer_id: int
    major_id: Optional[int] = None  # category tag
    name: str
    start_time: datetime
    end_time: datetime
    location: Optional[str] = None
    description: Optional[str] = None
    participant_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_interval(self) -> "Event":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self
