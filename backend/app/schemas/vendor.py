"""
Pydantic schemas for Vendor entity.
"""
from pydantic import Field
from typing import ClassVar, Optional, Tuple
from app.schemas.common import CamelModel, PartialModel


class VendorBase(CamelModel):
    """Base vendor schema."""
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    contract_file: Optional[str] = None  # file path or URL


class VendorCreate(VendorBase):
    """Schema for vendor creation."""
    pass


class VendorUpdate(PartialModel):
    """Schema for vendor update."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("name", "category")

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    contract_file: Optional[str] = None


class Vendor(VendorBase):
    """Stored vendor record."""
    id: int
