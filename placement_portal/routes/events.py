"""
Event Routes
Public event listing with derived status, TPO event management
"""

from typing import List
from fastapi import APIRouter, Depends, status
from placement_portal.auth import get_tpo_admin
from placement_portal.schemas.event import EventCreate, EventUpdate, EventResponse
from placement_portal.services.event_service import event_service
from placement_portal.services.event_status import utc_now

router = APIRouter()


@router.get("", response_model=List[EventResponse])
async def list_events():
    """All events; `status` is computed for the current time on every request"""
    return await event_service.list_with_status(utc_now())


@router.get("/grouped")
async def list_events_grouped():
    """
    Events split into ongoing, upcoming and past, each grouped by company
    then by year of the start date
    """
    return await event_service.grouped(utc_now())


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: int):
    return event_service.with_status(await event_service.get(event_id), utc_now())


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(request: EventCreate, current_admin: dict = Depends(get_tpo_admin)):
    """
    Create an event

    - **endDate** must not be before **startDate**
    """
    event = await event_service.create(request.model_dump())
    return event_service.with_status(event, utc_now())


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: int,
    request: EventUpdate,
    current_admin: dict = Depends(get_tpo_admin)
):
    event = await event_service.update(event_id, request.model_dump(exclude_unset=True))
    return event_service.with_status(event, utc_now())


@router.delete("/{event_id}")
async def delete_event(event_id: int, current_admin: dict = Depends(get_tpo_admin)):
    return await event_service.delete(event_id)
