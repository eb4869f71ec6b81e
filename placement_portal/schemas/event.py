"""
Event Request/Response Models
"""

from pydantic import Field
from typing import Optional
from datetime import datetime
from placement_portal.schemas.base import CamelModel
from placement_portal.services.event_status import EventStatus


class EventCreate(CamelModel):
    """New event"""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    notification_link: Optional[str] = None
    attachment_url: Optional[str] = None


class EventUpdate(CamelModel):
    """Partial update; omitted fields are left untouched"""
    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    notification_link: Optional[str] = None
    attachment_url: Optional[str] = None


class EventResponse(EventCreate):
    """Event details with the status derived at request time"""
    id: int
    status: EventStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
