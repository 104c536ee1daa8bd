"""
Seating chart table model.
"""
from sqlalchemy import Column, String, Integer
from app.db.base import BaseModel


class SeatingPlan(BaseModel):
    """A reception table."""
    __tablename__ = "seating_plans"

    table_name = Column(String(100), nullable=False)
    capacity = Column(Integer, nullable=False)
    category = Column(String(100), nullable=True)
    location = Column(String(200), nullable=True)  # position on the venue map
