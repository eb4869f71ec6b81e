"""
Attendance Routes
Public attendance marking, TPO review
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from placement_portal.auth import get_tpo_admin
from placement_portal.schemas.attendance import AttendanceCreate, AttendanceUpdate, AttendanceResponse
from placement_portal.services.attendance_service import attendance_service

router = APIRouter()


@router.get("", response_model=List[AttendanceResponse])
async def list_attendance(
    event_id: Optional[int] = Query(None, alias="eventId"),
    current_admin: dict = Depends(get_tpo_admin)
):
    """Attendance records, newest first, optionally for one event"""
    return await attendance_service.list({"event_id": event_id})


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
async def mark_attendance(request: AttendanceCreate):
    """
    Mark attendance (public)

    - **eventId** is optional; an unknown event id is rejected with 404
    """
    return await attendance_service.create(request.model_dump())


@router.put("/{attendance_id}", response_model=AttendanceResponse)
async def update_attendance(
    attendance_id: int,
    request: AttendanceUpdate,
    current_admin: dict = Depends(get_tpo_admin)
):
    return await attendance_service.update(attendance_id, request.model_dump(exclude_unset=True))


@router.delete("/{attendance_id}")
async def delete_attendance(attendance_id: int, current_admin: dict = Depends(get_tpo_admin)):
    return await attendance_service.delete(attendance_id)
