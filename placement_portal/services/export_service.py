"""
Export Service
Filters and projects records, then writes them to an XLSX workbook
"""

import io
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from placement_portal.logging_config import get_logger

logger = get_logger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

TIMESTAMP_FIELDS = ("createdAt", "updatedAt")

# Fixed order of filter values in export filenames
FILENAME_FILTER_ORDER = ("branch", "year", "batch")

# Characters allowed in a Content-Disposition filename
UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")

SHEET_NAMES = {
    "students": "Students",
    "alumni": "Alumni",
    "attendance": "Attendance",
}

EXPORT_COLUMNS = {
    "students": [
        "id", "name", "rollNumber", "branch", "year", "batch", "email", "phone",
        "selected", "companyName", "package", "role", "offerLetterUrl", "photoUrl",
    ],
    "alumni": [
        "id", "name", "rollNumber", "passOutYear", "higherEducationCollege",
        "collegeRollNumber", "address", "contactNumber", "email", "createdAt",
    ],
    "attendance": [
        "id", "eventId", "eventTitle", "studentName", "rollNumber", "branch", "year", "markedAt",
    ],
}

EXCLUDED_FIELDS = {
    "students": TIMESTAMP_FIELDS,
}


def _is_active(value: Optional[Any]) -> bool:
    return value is not None and str(value) != "" and str(value).lower() != "all"


def project_records(
    records: Iterable[Mapping[str, Any]],
    filters: Optional[Mapping[str, Any]] = None,
    exclude: Sequence[str] = (),
) -> List[Dict[str, Any]]:
    """
    Keep records matching every active filter and drop excluded fields.

    Filter values of None, "" or "all" are ignored. Values compare as
    strings so a query parameter "3" matches year 3.
    """
    active = {key: str(value) for key, value in (filters or {}).items() if _is_active(value)}
    excluded = set(exclude)

    projected = []
    for record in records:
        if any(str(record.get(key)) != value for key, value in active.items()):
            continue
        projected.append({key: value for key, value in record.items() if key not in excluded})

    return projected


def build_export_filename(base: str, filters: Optional[Mapping[str, Any]] = None, extension: str = "xlsx") -> str:
    """
    Build a download filename such as students_CSE_3.xlsx.

    Active filter values are appended in branch, year, batch order, with
    anything outside letters, digits, dot, dash and underscore replaced by "-".
    """
    filters = filters or {}
    parts = [base]
    for key in FILENAME_FILTER_ORDER:
        value = filters.get(key)
        if _is_active(value):
            parts.append(UNSAFE_FILENAME_CHARS.sub("-", str(value)).strip("-") or "value")
    return f"{'_'.join(parts)}.{extension.lstrip('.')}"


def _cell(value: Any) -> Any:
    # openpyxl rejects tz-aware datetimes and arbitrary objects
    if hasattr(value, "tzinfo") and getattr(value, "tzinfo", None) is not None:
        return value.replace(tzinfo=None)
    if isinstance(value, (str, int, float, bool)) or value is None or hasattr(value, "isoformat"):
        return value
    return str(value)


def build_workbook(kind: str, rows: List[Dict[str, Any]]) -> bytes:
    """Write rows to a single-sheet workbook and return the XLSX bytes"""
    columns = EXPORT_COLUMNS[kind]
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_NAMES[kind]

    sheet.append(columns)
    for cell in sheet[1]:
        cell.font = Font(bold=True)

    for row in rows:
        sheet.append([_cell(row.get(column)) for column in columns])

    buffer = io.BytesIO()
    workbook.save(buffer)
    logger.info("Exported %d %s rows", len(rows), kind)
    return buffer.getvalue()
