"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User, UserSettings
from app.models.guest import Guest, RsvpStatus
from app.models.budget import BudgetItem
from app.models.task import Task, TaskPriority
from app.models.vendor import Vendor
from app.models.appointment import Appointment
from app.models.seating import SeatingPlan
from app.models.session import SessionRecord

__all__ = [
    "User",
    "UserSettings",
    "Guest",
    "RsvpStatus",
    "BudgetItem",
    "Task",
    "TaskPriority",
    "Vendor",
    "Appointment",
    "SeatingPlan",
    "SessionRecord",
]
