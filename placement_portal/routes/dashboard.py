"""
Dashboard Routes
"""

from fastapi import APIRouter, Depends
from placement_portal.auth import get_tpo_admin
from placement_portal.schemas.dashboard import DashboardResponse
from placement_portal.services.dashboard_service import get_dashboard_stats
from placement_portal.services.event_status import utc_now

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(current_admin: dict = Depends(get_tpo_admin)):
    """TPO dashboard counts"""
    return await get_dashboard_stats(utc_now())
