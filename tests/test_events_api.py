from datetime import datetime, timedelta, timezone

from tests.conftest import upload


def iso(dt):
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def event_payload(start, end, **fields):
    payload = {
        "title": "Campus Drive",
        "description": "On-campus hiring",
        "company": "Acme",
        "startDate": iso(start),
        "endDate": iso(end),
    }
    payload.update(fields)
    return payload


def now():
    return datetime.now(timezone.utc)


def test_events_carry_derived_status(client):
    client.post("/api/events", json=event_payload(now() - timedelta(days=1), now() + timedelta(days=1), title="Now"))
    client.post("/api/events", json=event_payload(now() + timedelta(days=5), now() + timedelta(days=6), title="Soon"))
    client.post("/api/events", json=event_payload(now() - timedelta(days=9), now() - timedelta(days=8), title="Done"))

    r = client.get("/api/events")
    assert r.status_code == 200
    statuses = {event["title"]: event["status"] for event in r.json()}
    assert statuses == {"Now": "ongoing", "Soon": "upcoming", "Done": "past"}


def test_event_list_is_public(anon_client):
    assert anon_client.get("/api/events").status_code == 200


def test_create_event_requires_auth(anon_client):
    r = anon_client.post("/api/events", json=event_payload(now(), now() + timedelta(hours=1)))
    assert r.status_code in (401, 403)


def test_end_before_start_is_rejected(client):
    r = client.post("/api/events", json=event_payload(now(), now() - timedelta(days=1)))
    assert r.status_code == 400
    assert "endDate" in r.json()["detail"]


def test_update_checks_merged_dates(client):
    event = client.post("/api/events", json=event_payload(now(), now() + timedelta(days=2))).json()
    r = client.put(f"/api/events/{event['id']}", json={"endDate": iso(now() - timedelta(days=3))})
    assert r.status_code == 400

    r = client.put(f"/api/events/{event['id']}", json={"title": "Renamed"})
    assert r.status_code == 200
    assert r.json()["title"] == "Renamed"
    assert r.json()["company"] == "Acme"


def test_grouped_events(client):
    client.post("/api/events", json=event_payload(now() - timedelta(hours=1), now() + timedelta(hours=1)))
    client.post("/api/events", json=event_payload(
        datetime(2023, 3, 1, tzinfo=timezone.utc), datetime(2023, 3, 2, tzinfo=timezone.utc), company="Beta"
    ))

    grouped = client.get("/api/events/grouped").json()
    assert grouped["counts"] == {"ongoing": 1, "upcoming": 0, "past": 1}
    assert list(grouped["past"]) == ["Beta"]
    assert list(grouped["past"]["Beta"]) == ["2023"]
    assert grouped["upcoming"] == {}


def test_delete_event_unlinks_attendance(client):
    event = client.post("/api/events", json=event_payload(now(), now() + timedelta(hours=2))).json()
    mark = client.post("/api/attendance", json={"eventId": event["id"], "studentName": "Ada", "rollNumber": "R1"})
    assert mark.status_code == 201

    assert client.delete(f"/api/events/{event['id']}").status_code == 200
    records = client.get("/api/attendance").json()
    assert len(records) == 1
    assert records[0]["eventId"] is None


def test_import_events(client):
    text = (
        "title,description,company,startDate,endDate\n"
        "Drive,Hiring,Acme,2024-01-01T00:00:00Z,2024-01-02T00:00:00Z\n"
        "Talk,Guest talk,Beta,2024-02-01T00:00:00Z,2024-01-01T00:00:00Z\n"
        "Bad,Missing dates,Gamma,,\n"
    )
    body = upload(client, "events", text).json()
    assert body["imported"] == 1
    assert body["errors"][0].startswith("Row 3: endDate")
    assert body["errors"][1] == "Row 4: startDate, endDate are required"

    events = client.get("/api/events").json()
    assert events[0]["status"] == "past"


def test_dashboard_counts(client):
    client.post("/api/events", json=event_payload(now() + timedelta(days=1), now() + timedelta(days=2)))
    client.post("/api/students", json={"name": "Ada", "rollNumber": "R1", "selected": True})
    client.post("/api/students", json={"name": "Bob", "rollNumber": "R2"})

    r = client.get("/api/dashboard")
    assert r.status_code == 200
    body = r.json()
    assert body["totalStudents"] == 2
    assert body["placedStudents"] == 1
    assert body["upcomingEvents"] == 1
    assert body["totalEvents"] == 1
    assert len(body["recentEvents"]) == 1
