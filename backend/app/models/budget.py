"""
Budget line item model.
"""
from sqlalchemy import Column, String, Boolean, Date, Integer, Numeric, Text
from app.db.base import BaseModel


class BudgetItem(BaseModel):
    """A single planned or paid expense."""
    __tablename__ = "budget_items"

    category = Column(String(100), nullable=False)  # venue, catering...
    description = Column(Text, nullable=False)
    estimated_amount = Column(Numeric(12, 2), nullable=False)
    actual_amount = Column(Numeric(12, 2), nullable=True)
    paid = Column(Boolean, nullable=True, default=False)
    due_date = Column(Date, nullable=True)
    vendor_id = Column(Integer, nullable=True)  # not a foreign key: vendors may be deleted
    receipt_image = Column(String(500), nullable=True)
