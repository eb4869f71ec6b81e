"""
Attendance Request/Response Models
"""

from pydantic import Field
from typing import Optional
from datetime import datetime
from placement_portal.schemas.base import CamelModel


class AttendanceCreate(CamelModel):
    """Mark a student present; eventId may be omitted for unlinked records"""
    event_id: Optional[int] = None
    student_name: str = Field(..., min_length=1)
    roll_number: str = Field(..., min_length=1, max_length=50)
    branch: Optional[str] = None
    year: Optional[int] = None


class AttendanceUpdate(CamelModel):
    event_id: Optional[int] = None
    student_name: Optional[str] = None
    roll_number: Optional[str] = None
    branch: Optional[str] = None
    year: Optional[int] = None


class AttendanceResponse(AttendanceCreate):
    id: int
    marked_at: Optional[datetime] = None
