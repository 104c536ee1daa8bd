"""
Security utilities for password hashing and session cookie signing.
"""
from datetime import datetime, timezone
from typing import Optional
import hmac
import secrets
from argon2.low_level import Type, hash_secret_raw
from jose import JWTError, jwt
from app.core.config import settings

SALT_BYTES = 16
KEY_BYTES = 64


def _derive_key(password: str, salt: bytes) -> bytes:
    """Run argon2id over the password and salt with the configured costs."""
    return hash_secret_raw(
        secret=password.encode("utf-8"),
        salt=salt,
        time_cost=settings.PASSWORD_TIME_COST,
        memory_cost=settings.PASSWORD_MEMORY_COST,
        parallelism=settings.PASSWORD_PARALLELISM,
        hash_len=KEY_BYTES,
        type=Type.ID,
    )


def get_password_hash(password: str) -> str:
    """
    Hash a password with a fresh random salt.

    Returns "<hex key>.<hex salt>" so the salt travels with the hash.
    """
    salt = secrets.token_bytes(SALT_BYTES)
    key = _derive_key(password, salt)
    return f"{key.hex()}.{salt.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a stored "<hex key>.<hex salt>" value."""
    if not plain_password:
        return False
    hashed, sep, salt_hex = hashed_password.partition(".")
    if not sep or not hashed or not salt_hex:
        return False
    try:
        expected = bytes.fromhex(hashed)
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False
    # get_password_hash never produces other lengths
    if len(expected) != KEY_BYTES or len(salt) != SALT_BYTES:
        return False
    supplied = _derive_key(plain_password, salt)
    return hmac.compare_digest(expected, supplied)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def create_session_token(session_id: str) -> str:
    """Sign a session id for transport in the session cookie."""
    to_encode = {"sid": session_id, "iat": int(datetime.now(timezone.utc).timestamp())}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[str]:
    """Return the session id from a signed cookie value, or None if tampered."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None
