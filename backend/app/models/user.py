"""
User and per-user settings models.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, String, Boolean, Date, DateTime, ForeignKey, Integer
from app.db.base import BaseModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """User model with unique username and KDF-hashed password."""
    __tablename__ = "users"

    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    full_name = Column(String(255), nullable=True)
    role = Column(String(50), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class UserSettings(BaseModel):
    """Wedding details and feature flags, one row per user."""
    __tablename__ = "user_settings"

    # Loose reference: deleting a user does not cascade here
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    wedding_date = Column(Date, nullable=True)
    couple_names = Column(String(255), nullable=True)
    venue_address = Column(String(500), nullable=True)
    theme = Column(String(50), nullable=True, default="default")
    is_premium = Column(Boolean, nullable=True, default=False)
