"""
Pydantic schemas for per-user wedding settings.
"""
from typing import Optional
from datetime import date
from app.schemas.common import CamelModel, PartialModel


class UserSettingsBase(CamelModel):
    """Base settings schema."""
    wedding_date: Optional[date] = None
    couple_names: Optional[str] = None
    venue_address: Optional[str] = None
    theme: Optional[str] = "default"
    is_premium: Optional[bool] = False


class UserSettingsCreate(UserSettingsBase):
    """Schema for settings creation; the owner is set by the server."""
    user_id: int


class UserSettingsUpdate(PartialModel):
    """Schema for settings update. Ownership cannot be changed."""
    wedding_date: Optional[date] = None
    couple_names: Optional[str] = None
    venue_address: Optional[str] = None
    theme: Optional[str] = None
    is_premium: Optional[bool] = None


class UserSettings(UserSettingsBase):
    """Stored settings record."""
    id: int
    user_id: int
