"""
Pydantic schemas for request/response validation
"""

from placement_portal.schemas.student import (
    StudentCreate,
    StudentUpdate,
    StudentResponse,
)
from placement_portal.schemas.event import EventCreate, EventUpdate, EventResponse
from placement_portal.schemas.alumni import AlumniCreate, AlumniUpdate, AlumniResponse
from placement_portal.schemas.attendance import AttendanceCreate, AttendanceUpdate, AttendanceResponse
from placement_portal.schemas.imports import ImportResult

__all__ = [
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "AlumniCreate",
    "AlumniUpdate",
    "AlumniResponse",
    "AttendanceCreate",
    "AttendanceUpdate",
    "AttendanceResponse",
    "ImportResult",
]
