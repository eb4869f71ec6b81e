"""
Import / Export Models
"""

from pydantic import BaseModel, Field
from typing import List


class ImportResult(BaseModel):
    """Outcome of a CSV import; HTTP 200 even when rows failed"""
    success: bool = Field(..., description="True when at least one row was imported")
    message: str
    imported: int
    errors: List[str] = Field(default_factory=list, description="One 'Row N: ...' entry per rejected row")

    class Config:
        example = {
            "success": True,
            "message": "Imported 2 students successfully, with 1 errors",
            "imported": 2,
            "errors": ["Row 3: name is required"]
        }
