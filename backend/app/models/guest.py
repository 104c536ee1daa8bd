"""
Guest list model.
"""
from sqlalchemy import Column, String, Boolean, Text
from app.db.base import BaseModel
import enum


class RsvpStatus(str, enum.Enum):
    """RSVP status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


class Guest(BaseModel):
    """An invited guest."""
    __tablename__ = "guests"

    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    category = Column(String(100), nullable=False)  # family, friends, colleagues...
    rsvp_status = Column(String(20), nullable=True, default=RsvpStatus.PENDING.value)
    plus_one = Column(Boolean, nullable=True, default=False)
    dietary_restrictions = Column(Text, nullable=True)
    table_assignment = Column(String(100), nullable=True)
    meal_choice = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
