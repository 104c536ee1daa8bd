"""
Pydantic schemas for SeatingPlan entity.
"""
from pydantic import Field
from typing import ClassVar, Optional, Tuple
from app.schemas.common import CamelModel, PartialModel


class SeatingPlanBase(CamelModel):
    """Base seating plan schema."""
    table_name: str = Field(min_length=1)
    capacity: int = Field(ge=1)
    category: Optional[str] = None
    location: Optional[str] = None


class SeatingPlanCreate(SeatingPlanBase):
    """Schema for seating plan creation."""
    pass


class SeatingPlanUpdate(PartialModel):
    """Schema for seating plan update."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("table_name", "capacity")

    table_name: Optional[str] = Field(default=None, min_length=1)
    capacity: Optional[int] = Field(default=None, ge=1)
    category: Optional[str] = None
    location: Optional[str] = None


class SeatingPlan(SeatingPlanBase):
    """Stored seating plan record."""
    id: int
