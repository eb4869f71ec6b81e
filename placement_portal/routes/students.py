"""
Student Routes
TPO management of student records
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from placement_portal.auth import get_tpo_admin
from placement_portal.errors import ValidationError
from placement_portal.schemas.student import StudentCreate, StudentUpdate, StudentResponse
from placement_portal.services.grouping import UNKNOWN, UNKNOWN_BATCH, group_records
from placement_portal.services.student_service import student_service

router = APIRouter()

GROUPINGS = {
    "branch,year": (("branch", UNKNOWN), ("year", UNKNOWN)),
    "branch,batch,year": (("branch", UNKNOWN), ("batch", UNKNOWN_BATCH), ("year", UNKNOWN)),
}


@router.get("", response_model=List[StudentResponse])
async def list_students(
    branch: Optional[str] = Query(None),
    year: Optional[int] = Query(None),
    batch: Optional[str] = Query(None),
    selected: Optional[bool] = Query(None),
    current_admin: dict = Depends(get_tpo_admin)
):
    """List students, optionally filtered by branch, year, batch or placement"""
    return await student_service.list({
        "branch": branch,
        "year": year,
        "batch": batch,
        "selected": selected,
    })


@router.get("/grouped")
async def list_students_grouped(
    by: str = Query("branch,year", description="branch,year or branch,batch,year"),
    current_admin: dict = Depends(get_tpo_admin)
):
    """
    Students nested by branch then year (or branch, batch, year).
    Students missing a key are listed under Unknown.
    """
    keys = GROUPINGS.get(by.replace(" ", ""))
    if keys is None:
        raise ValidationError(f"Unsupported grouping '{by}'. Use one of: {', '.join(GROUPINGS)}")

    students = [
        StudentResponse.model_validate(record).model_dump(by_alias=True, mode="json")
        for record in await student_service.list()
    ]
    return group_records(students, *keys)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: int, current_admin: dict = Depends(get_tpo_admin)):
    return await student_service.get(student_id)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(request: StudentCreate, current_admin: dict = Depends(get_tpo_admin)):
    """
    Create a student

    - **rollNumber** must be unique (409 "Roll number already exists")
    """
    return await student_service.create(request.model_dump())


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    request: StudentUpdate,
    current_admin: dict = Depends(get_tpo_admin)
):
    """Update only the supplied fields"""
    return await student_service.update(student_id, request.model_dump(exclude_unset=True))


@router.delete("/{student_id}")
async def delete_student(student_id: int, current_admin: dict = Depends(get_tpo_admin)):
    return await student_service.delete(student_id)
