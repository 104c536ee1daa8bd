"""
In-memory storage for development and tests.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Mapping, Optional, Type

from pydantic import BaseModel

from app.core.exceptions import ConflictError
from app.core.utils import merge_fields
from app.schemas.appointment import Appointment
from app.schemas.budget import BudgetItem
from app.schemas.guest import Guest
from app.schemas.seating import SeatingPlan
from app.schemas.settings import UserSettings, UserSettingsCreate
from app.schemas.task import Task
from app.schemas.user import User, UserCreate
from app.schemas.vendor import Vendor
from app.storage.base import RecordT
from app.storage.sessions import MemorySessionStore


class MemoryCollection(Generic[RecordT]):
    """Dict keyed by id with a counter that never rewinds."""

    def __init__(self, record_cls: Type[RecordT]):
        self.record_cls = record_cls
        self.items: Dict[int, RecordT] = {}
        self.next_id = 1

    def list(self) -> List[RecordT]:
        return [item.model_copy() for item in self.items.values()]

    def get(self, item_id: int) -> Optional[RecordT]:
        item = self.items.get(item_id)
        return item.model_copy() if item else None

    def create(self, data: BaseModel, **extra: Any) -> RecordT:
        item_id = self.next_id
        self.next_id += 1
        record = self.record_cls(**data.model_dump(), **extra, id=item_id)
        self.items[item_id] = record
        return record.model_copy()

    def update(self, item_id: int, changes: Mapping[str, Any]) -> Optional[RecordT]:
        existing = self.items.get(item_id)
        if existing is None:
            return None
        record = self.record_cls(**merge_fields(existing.model_dump(), changes))
        self.items[item_id] = record
        return record.model_copy()

    def delete(self, item_id: int) -> bool:
        return self.items.pop(item_id, None) is not None

    def reset(self) -> None:
        self.items.clear()
        self.next_id = 1


class MemStorage:
    """Simple in-memory store; safe only under one-request-at-a-time use."""

    def __init__(self, session_max_age_seconds: int = 7 * 24 * 60 * 60):
        self.guests: MemoryCollection[Guest] = MemoryCollection(Guest)
        self.budget_items: MemoryCollection[BudgetItem] = MemoryCollection(BudgetItem)
        self.tasks: MemoryCollection[Task] = MemoryCollection(Task)
        self.vendors: MemoryCollection[Vendor] = MemoryCollection(Vendor)
        self.appointments: MemoryCollection[Appointment] = MemoryCollection(Appointment)
        self.seating_plans: MemoryCollection[SeatingPlan] = MemoryCollection(SeatingPlan)
        self.users: MemoryCollection[User] = MemoryCollection(User)
        self.user_settings: MemoryCollection[UserSettings] = MemoryCollection(UserSettings)
        self.session_store = MemorySessionStore(session_max_age_seconds)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.items.values():
            if user.username == username:
                return user.model_copy()
        return None

    def create_user(self, data: UserCreate) -> User:
        if any(user.username == data.username for user in self.users.items.values()):
            raise ConflictError("Username already exists")
        return self.users.create(
            data, role="user", created_at=datetime.now(timezone.utc)
        )

    def get_user_settings(self, settings_id: int) -> Optional[UserSettings]:
        return self.user_settings.get(settings_id)

    def get_user_settings_for_user(self, user_id: int) -> Optional[UserSettings]:
        for record in self.user_settings.items.values():
            if record.user_id == user_id:
                return record.model_copy()
        return None

    def create_user_settings(self, data: UserSettingsCreate) -> UserSettings:
        return self.user_settings.create(data)

    def update_user_settings(
        self, settings_id: int, changes: Mapping[str, Any]
    ) -> Optional[UserSettings]:
        return self.user_settings.update(settings_id, changes)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        for collection in (
            self.guests,
            self.budget_items,
            self.tasks,
            self.vendors,
            self.appointments,
            self.seating_plans,
            self.users,
            self.user_settings,
        ):
            collection.reset()
        self.session_store.clear()
