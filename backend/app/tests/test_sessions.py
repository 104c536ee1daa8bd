"""
Tests for idle-expiring session stores.
"""
import pytest
from app.db.session import create_db_engine, create_session_factory, init_db
from app.storage.sessions import DatabaseSessionStore, MemorySessionStore

MAX_AGE = 100


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(params=["memory", "database"])
def session_store(request, clock):
    if request.param == "memory":
        return MemorySessionStore(MAX_AGE, clock=clock)
    engine = create_db_engine("sqlite+pysqlite:///:memory:")
    init_db(engine)
    return DatabaseSessionStore(create_session_factory(engine), MAX_AGE, clock=clock)


def test_set_get_destroy(session_store):
    session_store.set("abc", {"user_id": 1})
    assert session_store.get("abc") == {"user_id": 1}

    session_store.destroy("abc")
    assert session_store.get("abc") is None
    session_store.destroy("abc")


def test_session_expires_after_inactivity(session_store, clock):
    session_store.set("abc", {"user_id": 1})
    clock.advance(MAX_AGE + 1)
    assert session_store.get("abc") is None


def test_access_extends_session(session_store, clock):
    session_store.set("abc", {"user_id": 1})
    clock.advance(MAX_AGE - 10)
    assert session_store.get("abc") is not None
    clock.advance(MAX_AGE - 10)
    assert session_store.get("abc") == {"user_id": 1}


def test_prune_removes_only_expired(session_store, clock):
    session_store.set("old", {"user_id": 1})
    clock.advance(MAX_AGE - 10)
    session_store.set("new", {"user_id": 2})
    clock.advance(20)

    assert session_store.prune() == 1
    assert len(session_store) == 1
    assert session_store.get("new") == {"user_id": 2}
    assert session_store.prune() == 0


def test_stored_payload_is_isolated():
    store = MemorySessionStore(MAX_AGE)
    payload = {"user_id": 1}
    store.set("abc", payload)
    payload["user_id"] = 2
    assert store.get("abc") == {"user_id": 1}


def test_touch_extends_without_reading(session_store, clock):
    session_store.set("abc", {"user_id": 1})
    clock.advance(MAX_AGE - 10)
    session_store.touch("abc")
    clock.advance(MAX_AGE - 10)
    assert session_store.prune() == 0
    assert session_store.get("abc") == {"user_id": 1}


def test_touch_does_not_revive_or_create(session_store, clock):
    session_store.touch("missing")
    assert session_store.get("missing") is None

    session_store.set("abc", {"user_id": 1})
    clock.advance(MAX_AGE + 1)
    session_store.touch("abc")
    assert session_store.get("abc") is None
    assert len(session_store) == 0
