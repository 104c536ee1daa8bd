"""
Pydantic schemas for Appointment entity.
"""
from pydantic import Field
from typing import ClassVar, Optional, Tuple
from datetime import date as dt_date
from app.schemas.common import CamelModel, PartialModel


class AppointmentBase(CamelModel):
    """Base appointment schema."""
    title: str = Field(min_length=1)
    vendor_id: Optional[int] = None
    date: dt_date
    time: str = Field(min_length=1)  # free-form, e.g. "14:30"
    location: Optional[str] = None
    notes: Optional[str] = None
    reminder: Optional[bool] = True


class AppointmentCreate(AppointmentBase):
    """Schema for appointment creation."""
    pass


class AppointmentUpdate(PartialModel):
    """Schema for appointment update."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("title", "date", "time")

    title: Optional[str] = Field(default=None, min_length=1)
    vendor_id: Optional[int] = None
    date: Optional[dt_date] = None
    time: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = None
    notes: Optional[str] = None
    reminder: Optional[bool] = None


class Appointment(AppointmentBase):
    """Stored appointment record."""
    id: int
