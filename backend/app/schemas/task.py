"""
Pydantic schemas for Task entity.
"""
from pydantic import Field
from typing import ClassVar, Optional, Tuple
from datetime import date
from app.models.task import TaskPriority
from app.schemas.common import CamelModel, PartialModel


class TaskBase(CamelModel):
    """Base task schema."""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: Optional[bool] = False
    priority: Optional[TaskPriority] = Field(default=TaskPriority.MEDIUM, validate_default=True)
    category: Optional[str] = None
    assigned_to: Optional[str] = None


class TaskCreate(TaskBase):
    """Schema for task creation."""
    pass


class TaskUpdate(PartialModel):
    """Schema for task update."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("title",)

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: Optional[bool] = None
    priority: Optional[TaskPriority] = None
    category: Optional[str] = None
    assigned_to: Optional[str] = None


class Task(TaskBase):
    """Stored task record."""
    id: int
