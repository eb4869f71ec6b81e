from tests.conftest import upload


def create_student(client, **fields):
    payload = {"name": "Ada", "rollNumber": "R1"}
    payload.update(fields)
    return client.post("/api/students", json=payload)


def test_create_and_get_student(client):
    r = create_student(client, branch="CSE", year=3, batch="2021-2025")
    assert r.status_code == 201
    student = r.json()
    assert student["rollNumber"] == "R1"
    assert student["selected"] is False
    assert student["id"] > 0

    r = client.get(f"/api/students/{student['id']}")
    assert r.status_code == 200
    assert r.json()["branch"] == "CSE"


def test_duplicate_roll_number_is_conflict(client):
    assert create_student(client).status_code == 201
    r = create_student(client, name="Someone Else")
    assert r.status_code == 409
    assert r.json()["detail"] == "Roll number already exists"


def test_missing_required_field_is_400(client):
    r = client.post("/api/students", json={"name": "Ada"})
    assert r.status_code == 400
    assert "rollNumber is required" in r.json()["detail"]


def test_partial_update_keeps_other_fields(client):
    student = create_student(client, branch="CSE", phone="555").json()
    r = client.put(f"/api/students/{student['id']}", json={"selected": True, "companyName": "Acme", "package": 12})
    assert r.status_code == 200
    updated = r.json()
    assert updated["selected"] is True
    assert updated["companyName"] == "Acme"
    assert updated["branch"] == "CSE"
    assert updated["phone"] == "555"
    assert updated["updatedAt"] is not None


def test_update_cannot_clear_required_field(client):
    student = create_student(client).json()
    r = client.put(f"/api/students/{student['id']}", json={"name": None})
    assert r.status_code == 400


def test_update_to_taken_roll_number_is_conflict(client):
    create_student(client)
    other = create_student(client, name="Bob", rollNumber="R2").json()
    r = client.put(f"/api/students/{other['id']}", json={"rollNumber": "R1"})
    assert r.status_code == 409


def test_unknown_student_is_404(client):
    assert client.get("/api/students/999").status_code == 404
    assert client.put("/api/students/999", json={"name": "X"}).status_code == 404
    assert client.delete("/api/students/999").status_code == 404


def test_delete_student(client):
    student = create_student(client).json()
    r = client.delete(f"/api/students/{student['id']}")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert client.get(f"/api/students/{student['id']}").status_code == 404


def test_list_filters(client):
    create_student(client, rollNumber="R1", branch="CSE", year=3)
    create_student(client, rollNumber="R2", branch="ECE", year=3)
    create_student(client, rollNumber="R3", branch="CSE", year=4, selected=True)

    assert len(client.get("/api/students").json()) == 3
    assert [s["rollNumber"] for s in client.get("/api/students?branch=CSE").json()] == ["R1", "R3"]
    assert [s["rollNumber"] for s in client.get("/api/students?branch=CSE&year=3").json()] == ["R1"]
    assert [s["rollNumber"] for s in client.get("/api/students?selected=true").json()] == ["R3"]


def test_grouped_students(client):
    create_student(client, rollNumber="R1", branch="CSE", year=3, batch="2021-2025")
    create_student(client, rollNumber="R2", branch="CSE", year=3)
    create_student(client, rollNumber="R3")

    grouped = client.get("/api/students/grouped").json()
    assert list(grouped) == ["CSE", "Unknown"]
    assert len(grouped["CSE"]["3"]) == 2

    grouped = client.get("/api/students/grouped", params={"by": "branch,batch,year"}).json()
    assert list(grouped["CSE"]) == ["2021-2025", "Unknown Batch"]

    assert client.get("/api/students/grouped", params={"by": "year"}).status_code == 400


def test_placement_stats_and_recent(client):
    create_student(client, rollNumber="R1", selected=True, companyName="Acme", package=10)
    create_student(client, rollNumber="R2", selected=True, companyName="Acme", package=20)
    create_student(client, rollNumber="R3", selected=True, companyName="Beta", package=15)
    create_student(client, rollNumber="R4")

    stats = client.get("/api/placements/stats").json()
    assert stats == {"studentsPlaced": 3, "activeCompanies": 2, "avgPackage": 15.0, "highestPackage": 20}

    recent = client.get("/api/placements/recent").json()
    assert recent["total"] == 3
    assert {p["companyName"] for p in recent["placements"]} == {"Acme", "Beta"}


def test_placement_stats_empty(client):
    stats = client.get("/api/placements/stats").json()
    assert stats == {"studentsPlaced": 0, "activeCompanies": 0, "avgPackage": 0.0, "highestPackage": 0}


def test_import_students_end_to_end(client):
    r = upload(client, "students", "name,rollNumber\nAda,R1\n,R2\nBob,R3")
    assert r.status_code == 200
    body = r.json()
    assert body["imported"] == 2
    assert body["success"] is True
    assert len(body["errors"]) == 1
    assert body["errors"][0].startswith("Row 3:")
    assert "name" in body["errors"][0] and "required" in body["errors"][0]
    assert len(client.get("/api/students").json()) == 2


def test_import_duplicate_roll_number_is_row_error(client):
    create_student(client, rollNumber="R1")
    body = upload(client, "students", "name,rollNumber\nAda,R1\nBob,R2\n").json()
    assert body["imported"] == 1
    assert body["errors"] == ["Row 2: Roll number already exists"]


def test_update_cannot_null_non_nullable_column(client):
    student = create_student(client).json()
    r = client.put(f"/api/students/{student['id']}", json={"selected": None})
    assert r.status_code == 400
    assert "selected" in r.json()["detail"]
    assert client.get(f"/api/students/{student['id']}").json()["selected"] is False


def test_unique_index_decides_concurrent_creates(client, monkeypatch):
    from placement_portal.services.student_service import student_service

    async def never_taken(roll_number, exclude_id=None):
        return False

    # Both writers pass the lookup; only the unique index can reject the second
    monkeypatch.setattr(student_service, "_roll_number_taken", never_taken)

    first = create_student(client, rollNumber="X1")
    second = create_student(client, name="Other", rollNumber="X1")
    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["detail"] == "Roll number already exists"
    assert len(client.get("/api/students").json()) == 1
