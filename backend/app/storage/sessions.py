"""
Session stores: idle-expiring maps from session id to a JSON payload.

Every successful ``get`` pushes the expiry forward, so a session lives for
``max_age_seconds`` of inactivity. Expired entries are never returned and are
removed by ``prune``, which the application calls on a fixed interval.
"""
import copy
import time
from typing import Any, Callable, Dict, Optional, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.orm import sessionmaker

from app.models.session import SessionRecord

Clock = Callable[[], float]


class MemorySessionStore:
    """Session store for development and tests."""

    def __init__(self, max_age_seconds: int, clock: Clock = time.time):
        self.max_age_seconds = max_age_seconds
        self.clock = clock
        self._sessions: Dict[str, Tuple[Dict[str, Any], float]] = {}

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        self.touch(sid)
        entry = self._sessions.get(sid)
        return copy.deepcopy(entry[0]) if entry else None

    def set(self, sid: str, data: Dict[str, Any]) -> None:
        self._sessions[sid] = (copy.deepcopy(data), self.clock() + self.max_age_seconds)

    def touch(self, sid: str) -> None:
        entry = self._sessions.get(sid)
        if entry is None:
            return
        data, expire = entry
        now = self.clock()
        if expire <= now:
            del self._sessions[sid]
            return
        self._sessions[sid] = (data, now + self.max_age_seconds)

    def destroy(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    def prune(self) -> int:
        now = self.clock()
        expired = [sid for sid, (_, expire) in self._sessions.items() if expire <= now]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


class DatabaseSessionStore:
    """Session store backed by the ``sessions`` table."""

    def __init__(self, Session: sessionmaker, max_age_seconds: int, clock: Clock = time.time):
        self.Session = Session
        self.max_age_seconds = max_age_seconds
        self.clock = clock

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        now = self.clock()
        with self.Session() as session:
            row = session.get(SessionRecord, sid)
            if row is None:
                return None
            if row.expire <= now:
                session.delete(row)
                session.commit()
                return None
            row.expire = now + self.max_age_seconds
            data = dict(row.sess)
            session.commit()
            return data

    def set(self, sid: str, data: Dict[str, Any]) -> None:
        expire = self.clock() + self.max_age_seconds
        with self.Session() as session:
            row = session.get(SessionRecord, sid)
            if row:
                row.sess = data
                row.expire = expire
            else:
                session.add(SessionRecord(sid=sid, sess=data, expire=expire))
            session.commit()

    def touch(self, sid: str) -> None:
        now = self.clock()
        with self.Session() as session:
            session.execute(
                update(SessionRecord)
                .where(SessionRecord.sid == sid, SessionRecord.expire > now)
                .values(expire=now + self.max_age_seconds)
            )
            session.commit()

    def destroy(self, sid: str) -> None:
        with self.Session() as session:
            session.execute(delete(SessionRecord).where(SessionRecord.sid == sid))
            session.commit()

    def prune(self) -> int:
        with self.Session() as session:
            result = session.execute(
                delete(SessionRecord).where(SessionRecord.expire <= self.clock())
            )
            session.commit()
            return result.rowcount or 0

    def __len__(self) -> int:
        with self.Session() as session:
            return len(session.execute(select(SessionRecord.sid)).all())
