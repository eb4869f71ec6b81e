"""
Record Validator
Decodes one CSV row (column -> raw string) into a typed create schema.

Column names, value types and required fields come from the pydantic create
schema of each record kind, so CSV import and the JSON API share one
definition of a valid record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, get_args

from pydantic import BaseModel, ValidationError as SchemaValidationError
from pydantic.alias_generators import to_camel

from placement_portal.schemas.alumni import AlumniCreate
from placement_portal.schemas.attendance import AttendanceCreate
from placement_portal.schemas.event import EventCreate
from placement_portal.schemas.student import StudentCreate
from placement_portal.services.event_status import to_naive_utc


class RecordKind(str, Enum):
    STUDENTS = "students"
    EVENTS = "events"
    ALUMNI = "alumni"
    ATTENDANCE = "attendance"


CREATE_SCHEMAS: Dict[RecordKind, Type[BaseModel]] = {
    RecordKind.STUDENTS: StudentCreate,
    RecordKind.EVENTS: EventCreate,
    RecordKind.ALUMNI: AlumniCreate,
    RecordKind.ATTENDANCE: AttendanceCreate,
}


@dataclass
class FieldSpec:
    name: str
    column: str
    type: Any
    required: bool


@dataclass
class RowDecode:
    """Either a decoded record or the problems that prevented decoding"""
    record: Optional[BaseModel] = None
    problems: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.problems

    @property
    def message(self) -> str:
        return "; ".join(self.problems)


def _value_type(annotation: Any) -> Any:
    """Optional[int] -> int, str -> str"""
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    return args[0] if args else annotation


def field_specs(kind: RecordKind) -> List[FieldSpec]:
    """Known CSV columns for a record kind, in schema order"""
    schema = CREATE_SCHEMAS[RecordKind(kind)]
    return [
        FieldSpec(
            name=name,
            column=info.alias or to_camel(name),
            type=_value_type(info.annotation),
            required=info.is_required(),
        )
        for name, info in schema.model_fields.items()
    ]


def required_columns(kind: RecordKind) -> List[str]:
    return [spec.column for spec in field_specs(kind) if spec.required]


def _convert(spec: FieldSpec, raw: str) -> Tuple[Any, Optional[str]]:
    """
    Convert a non-blank raw value.

    Returns (value, problem). An unparsable optional number is dropped
    rather than reported.
    """
    if spec.type is bool:
        return raw.lower() == "true", None

    if spec.type is int:
        try:
            return int(raw), None
        except ValueError:
            if spec.required:
                return None, f"{spec.column} must be a whole number"
            return None, None

    if spec.type is datetime:
        value = to_naive_utc(raw)
        if value is None:
            if spec.required:
                return None, f"{spec.column} must be a valid date"
            return None, None
        return value, None

    return raw, None


def _missing_message(columns: List[str]) -> str:
    if len(columns) == 1:
        return f"{columns[0]} is required"
    return f"{', '.join(columns)} are required"


def decode_row(kind: RecordKind, row: Mapping[str, Optional[str]]) -> RowDecode:
    """
    Decode a header-keyed CSV row into the create schema for `kind`.

    Unknown columns are ignored and blank values count as not provided.
    Problems are human-readable, e.g. "name is required".
    """
    values: Dict[str, Any] = {}
    missing: List[str] = []
    problems: List[str] = []

    for spec in field_specs(kind):
        raw = (row.get(spec.column) or "").strip()
        if not raw:
            if spec.required:
                missing.append(spec.column)
            continue

        value, problem = _convert(spec, raw)
        if problem:
            problems.append(problem)
        elif value is not None:
            values[spec.name] = value

    if missing:
        problems.insert(0, _missing_message(missing))
    if problems:
        return RowDecode(problems=problems)

    try:
        record = CREATE_SCHEMAS[RecordKind(kind)](**values)
    except SchemaValidationError as e:
        return RowDecode(problems=[describe_schema_errors(e.errors())])

    return RowDecode(record=record)


def describe_schema_errors(errors: List[Dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into one readable sentence"""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        name = loc[-1] if loc else "request"
        if "_" in name:
            name = to_camel(name)
        if error.get("type") == "missing":
            messages.append(f"{name} is required")
        else:
            messages.append(f"{name}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages)
