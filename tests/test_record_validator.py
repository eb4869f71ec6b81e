from datetime import datetime

from placement_portal.services.record_validator import (
    RecordKind,
    decode_row,
    describe_schema_errors,
    required_columns,
)


def test_required_columns_per_kind():
    assert required_columns(RecordKind.STUDENTS) == ["name", "rollNumber"]
    assert set(required_columns(RecordKind.EVENTS)) == {"title", "description", "company", "startDate", "endDate"}
    assert set(required_columns(RecordKind.ALUMNI)) == {
        "name", "rollNumber", "passOutYear", "address", "contactNumber", "email"
    }
    assert required_columns(RecordKind.ATTENDANCE) == ["studentName", "rollNumber"]


def test_student_row_decodes_with_types():
    decoded = decode_row(RecordKind.STUDENTS, {
        "name": " Ada ",
        "rollNumber": "R1",
        "year": "3",
        "selected": "TRUE",
        "package": "12",
        "favouriteColour": "blue",
    })
    assert decoded.ok
    record = decoded.record
    assert record.name == "Ada"
    assert record.roll_number == "R1"
    assert record.year == 3
    assert record.selected is True
    assert record.package == 12
    assert not hasattr(record, "favouriteColour")


def test_blank_optional_fields_are_omitted():
    decoded = decode_row(RecordKind.STUDENTS, {"name": "Ada", "rollNumber": "R1", "branch": "  ", "year": ""})
    assert decoded.ok
    assert decoded.record.branch is None
    assert decoded.record.year is None


def test_unparsable_optional_int_is_dropped():
    decoded = decode_row(RecordKind.STUDENTS, {"name": "Ada", "rollNumber": "R1", "year": "third"})
    assert decoded.ok
    assert decoded.record.year is None


def test_selected_other_values_are_false():
    decoded = decode_row(RecordKind.STUDENTS, {"name": "Ada", "rollNumber": "R1", "selected": "yes"})
    assert decoded.ok
    assert decoded.record.selected is False


def test_missing_required_field_is_named():
    decoded = decode_row(RecordKind.STUDENTS, {"name": "", "rollNumber": "R2"})
    assert not decoded.ok
    assert decoded.message == "name is required"


def test_several_missing_fields_are_listed():
    decoded = decode_row(RecordKind.ATTENDANCE, {})
    assert not decoded.ok
    assert decoded.message == "studentName, rollNumber are required"


def test_unparsable_required_int_fails():
    decoded = decode_row(RecordKind.ALUMNI, {
        "name": "Ada",
        "rollNumber": "R1",
        "passOutYear": "twenty",
        "address": "Somewhere",
        "contactNumber": "123",
        "email": "ada@example.com",
    })
    assert not decoded.ok
    assert "passOutYear" in decoded.message


def test_event_dates_parse_to_utc():
    decoded = decode_row(RecordKind.EVENTS, {
        "title": "Drive",
        "description": "Campus drive",
        "company": "Acme",
        "startDate": "2024-01-01T00:00:00Z",
        "endDate": "2024-01-01T10:30:00+05:30",
    })
    assert decoded.ok
    assert decoded.record.start_date == datetime(2024, 1, 1, 0, 0)
    assert decoded.record.end_date == datetime(2024, 1, 1, 5, 0)


def test_bad_event_date_fails():
    decoded = decode_row(RecordKind.EVENTS, {
        "title": "Drive",
        "description": "Campus drive",
        "company": "Acme",
        "startDate": "next tuesday",
        "endDate": "2024-01-02",
    })
    assert not decoded.ok
    assert decoded.message == "startDate must be a valid date"


def test_describe_schema_errors():
    errors = [
        {"loc": ("body", "rollNumber"), "type": "missing", "msg": "Field required"},
        {"loc": ("body", "year"), "type": "int_parsing", "msg": "Input should be a valid integer"},
    ]
    assert describe_schema_errors(errors) == "rollNumber is required; year: Input should be a valid integer"
