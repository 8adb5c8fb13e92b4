from datetime import date
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from resource_hub.features.calendar.models.event import CalendarEvent
from resource_hub.features.calendar.schemas.event import CalendarEventCreate


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """First day of the month and first day of the following month."""
    if month < 1 or month > 12:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Month must be between 1 and 12"
        )
    try:
        start = date(year, month, 1)
        end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Year is out of range"
        )
    return start, end


async def list_events(
    db: AsyncSession, month: Optional[int] = None, year: Optional[int] = None
) -> list[CalendarEvent]:
    query = select(CalendarEvent)

    # Only filter when both are given
    if month is not None and year is not None:
        start, end = month_bounds(month, year)
        query = query.where(CalendarEvent.event_date >= start, CalendarEvent.event_date < end)

    result = await db.execute(query.order_by(CalendarEvent.event_date.asc()))
    return list(result.scalars().all())


async def create_event(db: AsyncSession, data: CalendarEventCreate, created_by: str) -> CalendarEvent:
    event = CalendarEvent(
        title=data.title,
        description=data.description,
        event_date=data.event_date,
        event_type=data.event_type,
        created_by=created_by,
    )
    db.add(event)
    await db.commit()
    await db.refresh(event)
    return event
