"""
Shared fixtures: a throwaway SQLite database and an authenticated test client.

Settings are read at import time, so the environment is prepared before any
placement_portal module is imported.
"""

import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="tpo_portal_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR / 'test.db'}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DEFAULT_ADMIN_USERNAME"] = "tpo_admin"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin-password-123"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

import placement_portal.models  # noqa: F401
from placement_portal.auth import get_tpo_admin
from placement_portal.database import Base, engine
from placement_portal.main import app

TEST_ADMIN = {"username": "tester", "role": "tpo", "user_id": 1}


@pytest.fixture
def fresh_db():
    """Empty tables for every test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def anon_client(fresh_db):
    """Client without admin override (real auth)"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(fresh_db):
    """Client whose requests pass the TPO admin check"""
    app.dependency_overrides[get_tpo_admin] = lambda: TEST_ADMIN
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


def upload(client, kind, text, filename="data.csv"):
    """POST a CSV body to the import endpoint"""
    return client.post(
        f"/api/import/{kind}",
        files={"file": (filename, text.encode("utf-8"), "text/csv")},
    )
