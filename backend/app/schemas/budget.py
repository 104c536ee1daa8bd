"""
Pydantic schemas for BudgetItem entity.
"""
from pydantic import Field, field_validator
from typing import ClassVar, Optional, Tuple
from datetime import date
from decimal import Decimal
from app.schemas.common import CamelModel, PartialModel

CENTS = Decimal("0.01")
# Numeric(12, 2) leaves ten digits before the point
AMOUNT_LIMIT = Decimal(10) ** 10


def to_cents(value: Optional[Decimal]) -> Optional[Decimal]:
    """Round an amount to two places so both storage backends agree."""
    if value is None:
        return None
    if abs(value) >= AMOUNT_LIMIT:
        raise ValueError("amount is too large")
    return value.quantize(CENTS)


class BudgetItemBase(CamelModel):
    """Base budget item schema."""
    category: str = Field(min_length=1)
    description: str = Field(min_length=1)
    estimated_amount: Decimal
    actual_amount: Optional[Decimal] = None
    paid: Optional[bool] = False
    due_date: Optional[date] = None
    vendor_id: Optional[int] = None  # loose reference, existence not checked
    receipt_image: Optional[str] = None

    amounts_to_cents = field_validator("estimated_amount", "actual_amount")(to_cents)


class BudgetItemCreate(BudgetItemBase):
    """Schema for budget item creation."""
    pass


class BudgetItemUpdate(PartialModel):
    """Schema for budget item update."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("category", "description", "estimated_amount")

    category: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    estimated_amount: Optional[Decimal] = None
    actual_amount: Optional[Decimal] = None
    paid: Optional[bool] = None
    due_date: Optional[date] = None
    vendor_id: Optional[int] = None
    receipt_image: Optional[str] = None

    amounts_to_cents = field_validator("estimated_amount", "actual_amount")(to_cents)


class BudgetItem(BudgetItemBase):
    """Stored budget item record."""
    id: int
