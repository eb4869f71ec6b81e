import io

from openpyxl import load_workbook

from tests.conftest import upload


def seed_students(client):
    for roll, branch, year, batch in (
        ("R1", "CSE", 3, "2021-2025"),
        ("R2", "ECE", 3, "2021-2025"),
        ("R3", "CSE", 4, "2020-2024"),
    ):
        client.post("/api/students", json={
            "name": f"Student {roll}", "rollNumber": roll, "branch": branch, "year": year, "batch": batch
        })


def read_sheet(response):
    workbook = load_workbook(io.BytesIO(response.content))
    sheet = workbook.active
    rows = [[cell.value for cell in row] for row in sheet.iter_rows()]
    return sheet.title, rows[0], rows[1:]


def test_export_students_filtered(client):
    seed_students(client)
    r = client.get("/api/export/students", params={"branch": "CSE", "year": "all"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert r.headers["content-disposition"] == 'attachment; filename="students_CSE.xlsx"'

    title, header, rows = read_sheet(r)
    assert title == "Students"
    assert "createdAt" not in header and "updatedAt" not in header
    roll_index = header.index("rollNumber")
    assert [row[roll_index] for row in rows] == ["R1", "R3"]


def test_export_students_unfiltered(client):
    seed_students(client)
    r = client.get("/api/export/students")
    assert 'filename="students.xlsx"' in r.headers["content-disposition"]
    _, _, rows = read_sheet(r)
    assert len(rows) == 3


def test_export_alumni_and_attendance(client):
    client.post("/api/alumni", json={
        "name": "Ada", "rollNumber": "A1", "passOutYear": 2020,
        "address": "Somewhere", "contactNumber": "555", "email": "ada@example.com",
    })
    client.post("/api/attendance", json={"studentName": "Bob", "rollNumber": "R2"})

    title, header, rows = read_sheet(client.get("/api/export/alumni"))
    assert title == "Alumni"
    assert len(rows) == 1

    title, header, rows = read_sheet(client.get("/api/export/attendance"))
    assert title == "Attendance"
    assert rows[0][header.index("studentName")] == "Bob"


def test_export_events_not_supported(client):
    assert client.get("/api/export/events").status_code == 400


def test_import_without_file_is_400(client):
    assert client.post("/api/import/students").status_code == 400


def test_import_header_only_is_400(client):
    r = upload(client, "students", "name,rollNumber\n")
    assert r.status_code == 400
    assert r.json()["detail"] == "CSV file must have at least a header row and one data row"


def test_import_empty_file_is_400(client):
    assert upload(client, "students", "").status_code == 400


def test_import_unknown_kind(client):
    assert upload(client, "teachers", "name\nAda\n").status_code == 400


def test_import_attendance(client):
    body = upload(client, "attendance", "studentName,rollNumber,branch,year\nAda,R1,CSE,3\nBob,,ECE,2\n").json()
    assert body["imported"] == 1
    assert body["errors"] == ["Row 3: rollNumber is required"]


def test_import_template(client):
    r = client.get("/api/import/students/template")
    assert r.status_code == 200
    assert r.text.startswith("name,rollNumber,")
    assert "students_template.csv" in r.headers["content-disposition"]


def test_import_requires_auth(anon_client):
    r = upload(anon_client, "students", "name,rollNumber\nAda,R1\n")
    assert r.status_code in (401, 403)


def test_export_header_with_unusual_filter_value(client):
    seed_students(client)
    r = client.get("/api/export/students", params={"branch": 'Électronique "A"'})
    assert r.status_code == 200
    assert r.headers["content-disposition"] == 'attachment; filename="students_lectronique-A.xlsx"'
