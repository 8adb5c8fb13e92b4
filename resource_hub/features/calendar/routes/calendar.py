from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.dependencies import get_current_admin
from resource_hub.features.auth.models.user import User
from resource_hub.features.calendar.schemas.event import CalendarEventCreate, CalendarEventOut
from resource_hub.features.calendar.services.event import create_event, list_events
from resource_hub.platform.db.session import get_db
from resource_hub.platform.response import api_response

router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.get("", response_model=dict, summary="List academic calendar events")
async def get_calendar_events(
    month: Optional[int] = Query(None),
    year: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    events = await list_events(db, month=month, year=year)

    return api_response(
        data=[CalendarEventOut.model_validate(e) for e in events],
        message="Calendar events retrieved successfully",
    )


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED, summary="Add a calendar event")
async def add_calendar_event(
    request: CalendarEventCreate,
    admin: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    event = await create_event(db, request, created_by=admin.id)

    return api_response(
        data=CalendarEventOut.model_validate(event),
        message="Calendar event created successfully",
        status_code=status.HTTP_201_CREATED,
    )
