"""
Placement Routes
Public placement figures for the landing page
"""

from fastapi import APIRouter, Query
from placement_portal.schemas.student import PlacementStats, RecentPlacementList
from placement_portal.services.student_service import student_service

router = APIRouter()


@router.get("/stats", response_model=PlacementStats)
async def get_placement_stats():
    """Students placed, distinct companies, average and highest package (LPA)"""
    return await student_service.placement_stats()


@router.get("/recent", response_model=RecentPlacementList)
async def get_recent_placements(limit: int = Query(10, ge=1, le=50)):
    placements = await student_service.recent_placements(limit)
    return {"total": len(placements), "placements": placements}
