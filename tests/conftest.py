"""
Pytest configuration and fixtures.

Every test gets its own SQLite file under ``tmp_path`` with a freshly
created schema, so ids start at 1 and no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.config import settings
from social_media_api.app.core.db import init_db
from social_media_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "social_media_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def account(client):
    """A registered account: ``{"account_id": 1, "username": "sam", "password": "pass"}``."""
    response = client.post("/register", json={"username": "sam", "password": "pass"})
    assert response.status_code == 200
    return response.json()
