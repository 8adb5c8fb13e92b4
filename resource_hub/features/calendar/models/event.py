import enum

from sqlalchemy import Column, Date, Enum, ForeignKey, String, Text

from resource_hub.platform.db.base import BaseModel


class EventType(str, enum.Enum):
    exam = "exam"
    holiday = "holiday"
    event = "event"
    deadline = "deadline"
    other = "other"


class CalendarEvent(BaseModel):
    __tablename__ = "academic_calendar"
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    event_date = Column(Date, nullable=False, index=True)
    event_type = Column(Enum(EventType, name="event_type"), default=EventType.other, nullable=False)
    created_by = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
