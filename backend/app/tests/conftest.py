"""
Shared fixtures for API and storage tests.
"""
import os

# Settings are read at import time; configure before importing the app
os.environ.pop("DATABASE_URL", None)
os.environ.setdefault("PASSWORD_TIME_COST", "1")
os.environ.setdefault("PASSWORD_MEMORY_COST", "8")
os.environ.setdefault("PASSWORD_PARALLELISM", "1")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from app.main import create_app
from app.storage import DatabaseStorage, MemStorage


@pytest.fixture
def storage():
    """Fresh in-memory storage."""
    return MemStorage()


@pytest.fixture
def client(storage):
    """Test client for an app wired to the in-memory storage."""
    with TestClient(create_app(storage=storage)) as test_client:
        yield test_client


@pytest.fixture(params=["memory", "database"])
def any_storage(request):
    """Each storage backend in turn; the database one runs on in-memory SQLite."""
    if request.param == "memory":
        return MemStorage()
    return DatabaseStorage("sqlite+pysqlite:///:memory:")


@pytest.fixture
def register(client):
    """Register a user through the API and return the response."""
    def _register(username="alice", password="s3cret-pass", **extra):
        return client.post(
            "/api/register",
            json={"username": username, "password": password, **extra},
        )
    return _register
