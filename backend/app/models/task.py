"""
Planning checklist task model.
"""
from sqlalchemy import Column, String, Boolean, Date, Text
from app.db.base import BaseModel
import enum


class TaskPriority(str, enum.Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(BaseModel):
    """A to-do item on the planning checklist."""
    __tablename__ = "tasks"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=True, default=False)
    priority = Column(String(20), nullable=True, default=TaskPriority.MEDIUM.value)
    category = Column(String(100), nullable=True)  # pre-wedding, wedding day, post-wedding
    assigned_to = Column(String(100), nullable=True)
