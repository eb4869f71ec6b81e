"""
Import / Export Routes
CSV bulk import and XLSX export
"""

from typing import Optional
from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import Response, StreamingResponse
from io import BytesIO
from placement_portal.auth import get_tpo_admin
from placement_portal.config import settings
from placement_portal.errors import ValidationError
from placement_portal.schemas.alumni import AlumniResponse
from placement_portal.schemas.attendance import AttendanceResponse
from placement_portal.schemas.imports import ImportResult
from placement_portal.schemas.student import StudentResponse
from placement_portal.services.alumni_service import alumni_service
from placement_portal.services.attendance_service import attendance_service
from placement_portal.services.export_service import (
    EXCLUDED_FIELDS,
    XLSX_MEDIA_TYPE,
    build_export_filename,
    build_workbook,
    project_records,
)
from placement_portal.services.import_service import csv_template, import_upload
from placement_portal.services.record_validator import RecordKind
from placement_portal.services.student_service import student_service

router = APIRouter()


@router.post("/import/{kind}", response_model=ImportResult)
async def import_records(
    kind: RecordKind,
    file: UploadFile = File(...),
    current_admin: dict = Depends(get_tpo_admin)
):
    """
    Import a CSV file of students, events, alumni or attendance

    The first line is the header; columns use the JSON field names
    (e.g. `name,rollNumber,branch`). Rejected rows are listed in `errors`
    as `Row N: reason`; valid rows are still imported.
    """
    content = await file.read()
    if not content:
        raise ValidationError("No file uploaded")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise ValidationError(f"File too large. Maximum size is {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB")

    return await import_upload(kind, content)


@router.get("/import/{kind}/template")
async def download_import_template(kind: RecordKind, current_admin: dict = Depends(get_tpo_admin)):
    """CSV header line for a record kind"""
    return Response(
        content=csv_template(kind),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{kind.value}_template.csv"'}
    )


async def _export_rows(kind: RecordKind, filters: dict) -> list:
    if kind == RecordKind.STUDENTS:
        records = [
            StudentResponse.model_validate(record).model_dump(by_alias=True)
            for record in await student_service.list()
        ]
    elif kind == RecordKind.ALUMNI:
        records = [
            AlumniResponse.model_validate(record).model_dump(by_alias=True)
            for record in await alumni_service.list()
        ]
    else:
        records = []
        for record in await attendance_service.list_with_events():
            row = AttendanceResponse.model_validate(record).model_dump(by_alias=True)
            row["eventTitle"] = record.get("event_title")
            records.append(row)

    return project_records(records, filters, EXCLUDED_FIELDS.get(kind.value, ()))


@router.get("/export/{kind}")
async def export_records(
    kind: RecordKind,
    branch: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    batch: Optional[str] = Query(None),
    current_admin: dict = Depends(get_tpo_admin)
):
    """
    Download students, alumni or attendance as an XLSX workbook

    Students accept `branch`, `year` and `batch` filters ("all" means no filter).
    """
    if kind == RecordKind.EVENTS:
        raise ValidationError("Events cannot be exported")

    filters = {"branch": branch, "year": year, "batch": batch} if kind == RecordKind.STUDENTS else {}
    rows = await _export_rows(kind, filters)
    filename = build_export_filename(kind.value, filters, "xlsx")

    return StreamingResponse(
        BytesIO(build_workbook(kind.value, rows)),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
