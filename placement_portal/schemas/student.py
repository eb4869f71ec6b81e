"""
Student Request/Response Models
"""

from pydantic import Field
from typing import Optional, List
from datetime import datetime
from placement_portal.schemas.base import CamelModel


class StudentCreate(CamelModel):
    """New student record"""
    name: str = Field(..., min_length=1, description="Full name")
    roll_number: str = Field(..., min_length=1, max_length=50, description="Unique roll number")
    branch: Optional[str] = Field(default=None, description="Department, e.g. CSE")
    year: Optional[int] = Field(default=None, description="Current year of study")
    batch: Optional[str] = Field(default=None, description="Enrollment cohort, e.g. 2020-2024")
    email: Optional[str] = None
    phone: Optional[str] = None
    selected: bool = Field(default=False, description="Placed through the TPO")
    company_name: Optional[str] = None
    package: Optional[int] = Field(default=None, description="Package in LPA")
    role: Optional[str] = None
    offer_letter_url: Optional[str] = None
    photo_url: Optional[str] = None


class StudentUpdate(CamelModel):
    """Partial update; omitted fields are left untouched"""
    name: Optional[str] = None
    roll_number: Optional[str] = None
    branch: Optional[str] = None
    year: Optional[int] = None
    batch: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    selected: Optional[bool] = None
    company_name: Optional[str] = None
    package: Optional[int] = None
    role: Optional[str] = None
    offer_letter_url: Optional[str] = None
    photo_url: Optional[str] = None


class StudentResponse(StudentCreate):
    """Student details"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PlacementStats(CamelModel):
    """Landing page placement figures"""
    students_placed: int
    active_companies: int
    avg_package: float
    highest_package: int


class RecentPlacement(CamelModel):
    """A recently placed student"""
    id: int
    name: str
    branch: Optional[str] = None
    batch: Optional[str] = None
    company_name: Optional[str] = None
    package: Optional[int] = None
    role: Optional[str] = None
    photo_url: Optional[str] = None


class RecentPlacementList(CamelModel):
    total: int
    placements: List[RecentPlacement]
