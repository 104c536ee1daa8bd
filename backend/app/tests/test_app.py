"""
Tests for application wiring: health, auth guard and error responses.
"""
import threading
from datetime import datetime
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from app.core.exceptions import StorageError
from app import main
from app.main import create_app
from app.storage import MemStorage
from app.storage.sessions import MemorySessionStore


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert datetime.fromisoformat(body["time"])


def test_entity_routes_open_by_default(client):
    assert client.get("/api/guests").status_code == 200


def test_entity_routes_require_login_when_enabled():
    app = create_app(storage=MemStorage(), require_auth=True)
    with TestClient(app) as client:
        assert client.get("/api/guests").status_code == 401
        assert client.post("/api/tasks", json={"title": "x"}).status_code == 401

        client.post("/api/register", json={"username": "alice", "password": "pw-12345"})
        assert client.get("/api/guests").status_code == 200
        assert client.post("/api/tasks", json={"title": "x"}).status_code == 201


@pytest.mark.parametrize(
    "error",
    [StorageError(), OperationalError("SELECT 1", {}, Exception("connection refused"))],
)
def test_storage_failure_returns_generic_500(error):
    storage = MemStorage()

    def broken_list():
        raise error

    storage.guests.list = broken_list
    with TestClient(create_app(storage=storage)) as client:
        response = client.get("/api/guests")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "connection refused" not in response.text


def test_unexpected_error_returns_generic_500():
    storage = MemStorage()

    def broken_list():
        raise RuntimeError("boom")

    storage.tasks.list = broken_list
    with TestClient(create_app(storage=storage), raise_server_exceptions=False) as client:
        response = client.get("/api/tasks")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


@pytest.mark.parametrize("path", ["/api/guests", "/api/tasks", "/api/seating-plans"])
def test_oversized_id_is_not_found_on_both_backends(any_storage, path):
    huge = "99999999999999999999"
    with TestClient(create_app(storage=any_storage)) as client:
        assert client.get(f"{path}/{huge}").status_code == 404
        assert client.patch(f"{path}/{huge}", json={"notes": "x"}).status_code == 404
        assert client.delete(f"{path}/{huge}").status_code == 404


class ThreadRecordingSessionStore(MemorySessionStore):
    """Remembers which thread each session access ran on."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.threads = set()

    def get(self, sid):
        self.threads.add(threading.get_ident())
        return super().get(sid)

    def set(self, sid, data):
        self.threads.add(threading.get_ident())
        super().set(sid, data)


def test_session_access_stays_on_event_loop_thread():
    storage = MemStorage()
    storage.session_store = ThreadRecordingSessionStore(storage.session_store.max_age_seconds)
    app = create_app(storage=storage, require_auth=True)
    with TestClient(app) as client:
        client.post("/api/register", json={"username": "alice", "password": "pw-12345"})
        assert client.get("/api/user").status_code == 200
        assert client.get("/api/guests").status_code == 200
        assert client.get("/api/settings").status_code == 200

    # set() runs in the async login handler, so every get() shares its thread
    assert len(storage.session_store.threads) == 1


def test_run_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    main.run()
    assert calls == [(main.app, {"host": main.settings.HOST, "port": main.settings.PORT})]
