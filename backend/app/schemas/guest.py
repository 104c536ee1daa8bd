"""
Pydantic schemas for Guest entity.
"""
from pydantic import Field
from typing import ClassVar, Optional, Tuple
from app.models.guest import RsvpStatus
from app.schemas.common import CamelModel, PartialModel


class GuestBase(CamelModel):
    """Base guest schema."""
    name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    category: str = Field(min_length=1)
    rsvp_status: Optional[RsvpStatus] = Field(default=RsvpStatus.PENDING, validate_default=True)
    plus_one: Optional[bool] = False
    dietary_restrictions: Optional[str] = None
    table_assignment: Optional[str] = None
    meal_choice: Optional[str] = None
    notes: Optional[str] = None


class GuestCreate(GuestBase):
    """Schema for guest creation."""
    pass


class GuestUpdate(PartialModel):
    """Schema for guest update."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("name", "category")

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1)
    rsvp_status: Optional[RsvpStatus] = None
    plus_one: Optional[bool] = None
    dietary_restrictions: Optional[str] = None
    table_assignment: Optional[str] = None
    meal_choice: Optional[str] = None
    notes: Optional[str] = None


class Guest(GuestBase):
    """Stored guest record."""
    id: int
