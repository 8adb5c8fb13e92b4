from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from resource_hub.features.calendar.models.event import EventType


class CalendarEventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    event_date: date
    event_type: EventType = EventType.other


class CalendarEventOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    event_date: date
    event_type: EventType
    created_by: Optional[str] = None

    class Config:
        from_attributes = True
