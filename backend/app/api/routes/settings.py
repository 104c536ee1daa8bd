"""
Wedding settings routes, scoped to the logged-in user.
"""
from fastapi import APIRouter, Depends
from app.api.dependencies import get_current_user, get_storage
from app.core.exceptions import NotFoundError
from app.schemas.settings import UserSettings, UserSettingsCreate, UserSettingsUpdate
from app.schemas.user import User
from app.storage.base import Storage

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=UserSettings)
async def get_settings(
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Get the current user's settings, creating defaults on first access."""
    user_settings = storage.get_user_settings_for_user(current_user.id)
    if not user_settings:
        user_settings = storage.create_user_settings(UserSettingsCreate(user_id=current_user.id))
    return user_settings


@router.patch("/{settings_id}", response_model=UserSettings)
async def update_settings(
    settings_id: int,
    settings_data: UserSettingsUpdate,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Update the current user's settings."""
    existing = storage.get_user_settings(settings_id)
    # Another user's settings are reported as missing
    if not existing or existing.user_id != current_user.id:
        raise NotFoundError("Settings")
    user_settings = storage.update_user_settings(settings_id, settings_data.changes())
    if not user_settings:
        raise NotFoundError("Settings")
    return user_settings
