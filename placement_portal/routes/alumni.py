"""
Alumni Routes
Public registration, TPO management
"""

from typing import List
from fastapi import APIRouter, Depends, status
from placement_portal.auth import get_tpo_admin
from placement_portal.schemas.alumni import AlumniCreate, AlumniUpdate, AlumniResponse
from placement_portal.services.alumni_service import alumni_service
from placement_portal.services.grouping import UNKNOWN, group_records, sort_years_descending

router = APIRouter()


@router.get("", response_model=List[AlumniResponse])
async def list_alumni(current_admin: dict = Depends(get_tpo_admin)):
    return await alumni_service.list()


@router.get("/grouped")
async def list_alumni_grouped(current_admin: dict = Depends(get_tpo_admin)):
    """Alumni grouped by pass-out year, newest year first"""
    alumni = [
        AlumniResponse.model_validate(record).model_dump(by_alias=True, mode="json")
        for record in await alumni_service.list()
    ]
    return sort_years_descending(group_records(alumni, ("passOutYear", UNKNOWN)))


@router.post("", response_model=AlumniResponse, status_code=status.HTTP_201_CREATED)
async def register_alumni(request: AlumniCreate):
    """Alumni self-registration (public)"""
    return await alumni_service.create(request.model_dump())


@router.put("/{alumni_id}", response_model=AlumniResponse)
async def update_alumni(
    alumni_id: int,
    request: AlumniUpdate,
    current_admin: dict = Depends(get_tpo_admin)
):
    return await alumni_service.update(alumni_id, request.model_dump(exclude_unset=True))


@router.delete("/{alumni_id}")
async def delete_alumni(alumni_id: int, current_admin: dict = Depends(get_tpo_admin)):
    return await alumni_service.delete(alumni_id)
