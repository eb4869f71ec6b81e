from placement_portal.auth import create_access_token, decode_access_token


def login(client, username="tpo_admin", password="admin-password-123"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_token_round_trip():
    token = create_access_token({"sub": "tpo_admin", "role": "tpo"})
    payload = decode_access_token(token)
    assert payload["sub"] == "tpo_admin"
    assert "exp" in payload


def test_login_with_seeded_admin(anon_client):
    r = login(anon_client)
    assert r.status_code == 200
    body = r.json()
    assert body["role"] == "tpo"
    assert body["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {body['access_token']}"}
    me = anon_client.get("/api/auth/me", headers=headers)
    assert me.json() == {"username": "tpo_admin", "role": "tpo"}

    r = anon_client.post("/api/students", json={"name": "Ada", "rollNumber": "R1"}, headers=headers)
    assert r.status_code == 201


def test_wrong_password(anon_client):
    assert login(anon_client, password="nope").status_code == 401


def test_bad_token(anon_client):
    r = anon_client.get("/api/students", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_non_tpo_role_is_forbidden(anon_client):
    token = create_access_token({"sub": "someone", "role": "student"})
    r = anon_client.get("/api/students", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403


def test_health(anon_client):
    r = anon_client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_logout(anon_client):
    r = anon_client.post("/api/auth/logout")
    assert r.status_code == 200
    assert r.json()["status"] == "success"
