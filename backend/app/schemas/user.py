"""
Pydantic schemas for User entity.
"""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Schema for registration."""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    full_name: Optional[str] = None


class UserLogin(CamelModel):
    """Schema for user login."""
    username: str
    password: str


class UserResponse(CamelModel):
    """Public view of a user; never carries the password."""
    id: int
    username: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: str = "user"
    created_at: datetime


class User(UserResponse):
    """Stored user record including the password hash."""
    password: str


class MessageResponse(CamelModel):
    message: str
