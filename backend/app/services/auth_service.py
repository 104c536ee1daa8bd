"""
Authentication service: registration, credential checks and server-side sessions.
"""
import logging
from typing import Optional
from app.core.exceptions import ConflictError, UnauthorizedError
from app.core.security import (
    create_session_token,
    decode_session_token,
    get_password_hash,
    new_session_id,
    verify_password,
)
from app.schemas.settings import UserSettingsCreate
from app.schemas.user import User, UserCreate
from app.storage.base import Storage

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def register_user(storage: Storage, user_data: UserCreate) -> User:
    """
    Create a user with a hashed password and default settings.

    The user and settings rows are two independent writes; if the second one
    fails the user still exists.
    """
    if storage.get_user_by_username(user_data.username):
        raise ConflictError("Username already exists")

    hashed = get_password_hash(user_data.password)
    user = storage.create_user(user_data.model_copy(update={"password": hashed}))
    storage.create_user_settings(UserSettingsCreate(user_id=user.id, is_premium=False))
    logger.info(f"Registered user {user.username} (id={user.id})")
    return user


def authenticate_user(storage: Storage, username: str, password: str) -> User:
    """Return the user for valid credentials; the failure reason stays server-side."""
    user = storage.get_user_by_username(username)
    if not user:
        logger.debug(f"Login failed for {username!r}: unknown user")
        raise UnauthorizedError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password):
        logger.debug(f"Login failed for {username!r}: wrong password")
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return user


def start_session(storage: Storage, user: User) -> str:
    """Store a new session for the user and return the signed cookie value."""
    session_id = new_session_id()
    storage.session_store.set(session_id, {"user_id": user.id})
    return create_session_token(session_id)


def resolve_session(storage: Storage, token: Optional[str]) -> Optional[User]:
    """Map a cookie value to its user, or None when missing, tampered or expired."""
    if not token:
        return None
    session_id = decode_session_token(token)
    if not session_id:
        return None
    data = storage.session_store.get(session_id)
    if not data or "user_id" not in data:
        return None
    return storage.get_user(data["user_id"])


def end_session(storage: Storage, token: Optional[str]) -> None:
    if not token:
        return
    session_id = decode_session_token(token)
    if session_id:
        storage.session_store.destroy(session_id)
