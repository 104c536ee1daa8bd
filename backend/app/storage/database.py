"""
SQLAlchemy-backed storage. Accepts any SQLAlchemy URL (Postgres, MySQL, or
SQLite for tests).
"""
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Generic, Iterator, List, Mapping, Optional, Type

from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app import models
from app.core.exceptions import ConflictError, StorageError
from app.db.base import MAX_ID, BaseModel as OrmModel
from app.db.session import create_db_engine, create_session_factory, init_db
from app.schemas.appointment import Appointment
from app.schemas.budget import BudgetItem
from app.schemas.guest import Guest
from app.schemas.seating import SeatingPlan
from app.schemas.settings import UserSettings, UserSettingsCreate
from app.schemas.task import Task
from app.schemas.user import User, UserCreate
from app.schemas.vendor import Vendor
from app.storage.base import RecordT
from app.storage.sessions import DatabaseSessionStore

logger = logging.getLogger(__name__)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """Open a session and convert driver failures into StorageError."""
    session = session_factory()
    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database operation failed")
        raise StorageError() from exc
    finally:
        session.close()


def _storable_id(item_id: int) -> bool:
    """Ids outside the column range were never issued and cannot be bound."""
    return -MAX_ID - 1 <= item_id <= MAX_ID


class SqlCollection(Generic[RecordT]):
    """One table exposed through the entity store interface."""

    def __init__(self, Session: sessionmaker, model: Type[OrmModel], record_cls: Type[RecordT]):
        self.Session = Session
        self.model = model
        self.record_cls = record_cls

    def _to_record(self, row: OrmModel) -> RecordT:
        return self.record_cls.model_validate(row)

    def list(self) -> List[RecordT]:
        with session_scope(self.Session) as session:
            rows = session.execute(select(self.model).order_by(self.model.id)).scalars().all()
            return [self._to_record(row) for row in rows]

    def get(self, item_id: int) -> Optional[RecordT]:
        if not _storable_id(item_id):
            return None
        with session_scope(self.Session) as session:
            row = session.get(self.model, item_id)
            return self._to_record(row) if row else None

    def create(self, data: BaseModel, **extra: Any) -> RecordT:
        with session_scope(self.Session) as session:
            row = self.model(**data.model_dump(), **extra)
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_record(row)

    def update(self, item_id: int, changes: Mapping[str, Any]) -> Optional[RecordT]:
        if not _storable_id(item_id):
            return None
        values = {field: value for field, value in changes.items() if field != "id"}
        if not values:
            return self.get(item_id)
        with session_scope(self.Session) as session:
            result = session.execute(
                update(self.model).where(self.model.id == item_id).values(**values)
            )
            if result.rowcount == 0:
                session.rollback()
                return None
            session.commit()
            row = session.get(self.model, item_id)
            return self._to_record(row) if row else None

    def delete(self, item_id: int) -> bool:
        if not _storable_id(item_id):
            return False
        with session_scope(self.Session) as session:
            result = session.execute(delete(self.model).where(self.model.id == item_id))
            session.commit()
            return result.rowcount > 0


class DatabaseStorage:
    """Relational storage with the same semantics as MemStorage."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        session_max_age_seconds: int = 7 * 24 * 60 * 60,
    ):
        if not database_url:
            raise ValueError("DATABASE_URL is required for DatabaseStorage")
        self.engine = create_db_engine(database_url, echo=echo)
        self.Session = create_session_factory(self.engine)
        init_db(self.engine)

        self.guests = SqlCollection(self.Session, models.Guest, Guest)
        self.budget_items = SqlCollection(self.Session, models.BudgetItem, BudgetItem)
        self.tasks = SqlCollection(self.Session, models.Task, Task)
        self.vendors = SqlCollection(self.Session, models.Vendor, Vendor)
        self.appointments = SqlCollection(self.Session, models.Appointment, Appointment)
        self.seating_plans = SqlCollection(self.Session, models.SeatingPlan, SeatingPlan)
        self.users = SqlCollection(self.Session, models.User, User)
        self.user_settings = SqlCollection(self.Session, models.UserSettings, UserSettings)
        self.session_store = DatabaseSessionStore(self.Session, session_max_age_seconds)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with session_scope(self.Session) as session:
            row = session.execute(
                select(models.User).where(models.User.username == username)
            ).scalar_one_or_none()
            return User.model_validate(row) if row else None

    def create_user(self, data: UserCreate) -> User:
        row = models.User(
            **data.model_dump(), role="user", created_at=datetime.now(timezone.utc)
        )
        with session_scope(self.Session) as session:
            session.add(row)
            try:
                session.commit()
            except IntegrityError as exc:
                # a concurrent registration won the unique username
                session.rollback()
                raise ConflictError("Username already exists") from exc
            session.refresh(row)
            return User.model_validate(row)

    def get_user_settings(self, settings_id: int) -> Optional[UserSettings]:
        return self.user_settings.get(settings_id)

    def get_user_settings_for_user(self, user_id: int) -> Optional[UserSettings]:
        with session_scope(self.Session) as session:
            row = session.execute(
                select(models.UserSettings)
                .where(models.UserSettings.user_id == user_id)
                .order_by(models.UserSettings.id)
                .limit(1)
            ).scalar_one_or_none()
            return UserSettings.model_validate(row) if row else None

    def create_user_settings(self, data: UserSettingsCreate) -> UserSettings:
        return self.user_settings.create(data)

    def update_user_settings(
        self, settings_id: int, changes: Mapping[str, Any]
    ) -> Optional[UserSettings]:
        return self.user_settings.update(settings_id, changes)
