"""
Notification and News Request/Response Models
"""

from pydantic import Field
from typing import Optional
from datetime import datetime
from placement_portal.schemas.base import CamelModel


class NotificationCreate(CamelModel):
    """New hero/important notification"""
    title: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="URGENT, NEW, INFO or EVENT")
    link: Optional[str] = None
    icon: Optional[str] = Field(default=None, description="Hero notifications only")


class NotificationUpdate(CamelModel):
    title: Optional[str] = None
    type: Optional[str] = None
    link: Optional[str] = None
    icon: Optional[str] = None


class NotificationResponse(CamelModel):
    id: int
    title: str
    type: str
    link: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NewsCreate(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class NewsUpdate(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NewsResponse(NewsCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
