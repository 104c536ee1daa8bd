"""
Vendor model.
"""
from sqlalchemy import Column, String, Text
from app.db.base import BaseModel


class Vendor(BaseModel):
    """A hired or prospective service provider."""
    __tablename__ = "vendors"

    name = Column(String(200), nullable=False)
    category = Column(String(100), nullable=False)  # photographer, caterer, venue...
    contact_name = Column(String(200), nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(500), nullable=True)
    address = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    contract_file = Column(String(500), nullable=True)
