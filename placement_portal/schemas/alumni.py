"""
Alumni Request/Response Models
"""

from pydantic import Field
from typing import Optional
from datetime import datetime
from placement_portal.schemas.base import CamelModel


class AlumniCreate(CamelModel):
    """Alumni registration"""
    name: str = Field(..., min_length=1)
    roll_number: str = Field(..., min_length=1, max_length=50)
    pass_out_year: int
    higher_education_college: Optional[str] = None
    college_roll_number: Optional[str] = None
    address: str = Field(..., min_length=1)
    contact_number: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class AlumniUpdate(CamelModel):
    name: Optional[str] = None
    roll_number: Optional[str] = None
    pass_out_year: Optional[int] = None
    higher_education_college: Optional[str] = None
    college_roll_number: Optional[str] = None
    address: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None


class AlumniResponse(AlumniCreate):
    id: int
    created_at: Optional[datetime] = None
