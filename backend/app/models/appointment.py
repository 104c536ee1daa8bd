"""
Appointment model.
"""
from sqlalchemy import Column, String, Boolean, Date, Integer, Text
from app.db.base import BaseModel


class Appointment(BaseModel):
    """A scheduled meeting, optionally with a vendor."""
    __tablename__ = "appointments"

    title = Column(String(200), nullable=False)
    vendor_id = Column(Integer, nullable=True)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(20), nullable=False)
    location = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    reminder = Column(Boolean, nullable=True, default=True)
