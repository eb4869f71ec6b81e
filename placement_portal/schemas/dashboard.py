"""
Admin Dashboard Models
"""

from typing import List
from placement_portal.schemas.base import CamelModel
from placement_portal.schemas.event import EventResponse


class DashboardResponse(CamelModel):
    """TPO admin overview"""
    total_students: int
    placed_students: int
    total_events: int
    ongoing_events: int
    upcoming_events: int
    past_events: int
    total_alumni: int
    total_attendance: int
    recent_events: List[EventResponse]
