"""
Storage interfaces shared by the in-memory and database implementations.
"""
from typing import Any, Dict, List, Mapping, Optional, Protocol, TypeVar

from pydantic import BaseModel

from app.schemas.appointment import Appointment
from app.schemas.budget import BudgetItem
from app.schemas.guest import Guest
from app.schemas.seating import SeatingPlan
from app.schemas.settings import UserSettings, UserSettingsCreate
from app.schemas.task import Task
from app.schemas.user import User, UserCreate
from app.schemas.vendor import Vendor

RecordT = TypeVar("RecordT", bound=BaseModel)


class EntityStore(Protocol[RecordT]):
    """CRUD over one entity collection."""

    def list(self) -> List[RecordT]:
        ...

    def get(self, item_id: int) -> Optional[RecordT]:
        ...

    def create(self, data: BaseModel) -> RecordT:
        ...

    def update(self, item_id: int, changes: Mapping[str, Any]) -> Optional[RecordT]:
        ...

    def delete(self, item_id: int) -> bool:
        ...


class SessionStore(Protocol):
    """Keyed store of opaque session payloads that expire when idle."""

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        ...

    def set(self, sid: str, data: Dict[str, Any]) -> None:
        ...

    def touch(self, sid: str) -> None:
        """Push a live session's expiry forward without reading it."""
        ...

    def destroy(self, sid: str) -> None:
        ...

    def prune(self) -> int:
        ...


class Storage(Protocol):
    """Everything the route layer needs from persistence."""

    guests: EntityStore[Guest]
    budget_items: EntityStore[BudgetItem]
    tasks: EntityStore[Task]
    vendors: EntityStore[Vendor]
    appointments: EntityStore[Appointment]
    seating_plans: EntityStore[SeatingPlan]
    session_store: SessionStore

    def get_user(self, user_id: int) -> Optional[User]:
        ...

    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    def create_user(self, data: UserCreate) -> User:
        """
        Persist a user. ``data.password`` must already be hashed.

        Raises ConflictError when the username is taken.
        """
        ...

    def get_user_settings(self, settings_id: int) -> Optional[UserSettings]:
        ...

    def get_user_settings_for_user(self, user_id: int) -> Optional[UserSettings]:
        ...

    def create_user_settings(self, data: UserSettingsCreate) -> UserSettings:
        ...

    def update_user_settings(
        self, settings_id: int, changes: Mapping[str, Any]
    ) -> Optional[UserSettings]:
        ...
