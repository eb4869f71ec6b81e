"""
Import Service
Bulk CSV import with per-row validation and partial success.

Rows are persisted one at a time through the same services as the JSON API.
A failing row is reported as "Row N: <reason>" and never stops the batch.
"""

from typing import Dict, List

from fastapi import HTTPException

from placement_portal.errors import ValidationError
from placement_portal.logging_config import get_logger
from placement_portal.services.alumni_service import alumni_service
from placement_portal.services.attendance_service import attendance_service
from placement_portal.services.csv_parser import CSVParser
from placement_portal.services.event_service import event_service
from placement_portal.services.record_service import RecordService
from placement_portal.services.record_validator import RecordKind, decode_row, field_specs
from placement_portal.services.student_service import student_service

logger = get_logger(__name__)

EMPTY_FILE_MESSAGE = "CSV file must have at least a header row and one data row"

IMPORT_TARGETS: Dict[RecordKind, RecordService] = {
    RecordKind.STUDENTS: student_service,
    RecordKind.EVENTS: event_service,
    RecordKind.ALUMNI: alumni_service,
    RecordKind.ATTENDANCE: attendance_service,
}


def summarize(kind: RecordKind, imported: int, errors: List[str]) -> dict:
    message = f"Imported {imported} {RecordKind(kind).value} successfully"
    if errors:
        message += f", with {len(errors)} errors"
    return {
        "success": imported > 0,
        "message": message,
        "imported": imported,
        "errors": errors,
    }


async def import_csv(kind: RecordKind, csv_text: str) -> dict:
    """
    Import every valid row of `csv_text` as a `kind` record.

    Raises:
        ValidationError: file has no header or no data rows
    """
    kind = RecordKind(kind)
    headers, rows = CSVParser.split_rows(csv_text)
    if not headers or not rows:
        raise ValidationError(EMPTY_FILE_MESSAGE)

    target = IMPORT_TARGETS[kind]
    imported = 0
    errors: List[str] = []

    for row_num, row in rows:
        decoded = decode_row(kind, row)
        if not decoded.ok:
            errors.append(f"Row {row_num}: {decoded.message}")
            continue

        try:
            await target.create(decoded.record.model_dump())
        except HTTPException as e:
            errors.append(f"Row {row_num}: {e.detail}")
            continue

        imported += 1

    result = summarize(kind, imported, errors)
    logger.info(
        "CSV import of %s: %d imported, %d rejected",
        kind.value, imported, len(errors)
    )
    return result


async def import_upload(kind: RecordKind, file_content: bytes) -> dict:
    """Decode uploaded bytes and import them"""
    return await import_csv(kind, CSVParser.decode(file_content))


def csv_template(kind: RecordKind) -> str:
    """Header line listing every known column for `kind`"""
    return ",".join(spec.column for spec in field_specs(kind)) + "\n"
