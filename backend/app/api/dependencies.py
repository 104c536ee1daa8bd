"""
Dependency wiring for the route layer.
"""
import logging
from fastapi import Depends, Request
from app.core.config import Settings, settings
from app.core.exceptions import UnauthorizedError
from app.schemas.user import User
from app.services.auth_service import resolve_session
from app.storage import DatabaseStorage, MemStorage, Storage

logger = logging.getLogger(__name__)


def create_storage(config: Settings = settings) -> Storage:
    """Build the storage backend named by the configuration."""
    if config.DATABASE_URL:
        logger.info("Using database storage")
        return DatabaseStorage(
            config.DATABASE_URL,
            echo=config.DB_ECHO,
            session_max_age_seconds=config.session_max_age_seconds,
        )
    logger.info("DATABASE_URL not set, using in-memory storage")
    return MemStorage(session_max_age_seconds=config.session_max_age_seconds)


def get_storage(request: Request) -> Storage:
    """Return the storage instance the application was created with."""
    return request.app.state.storage


async def get_current_user(request: Request, storage: Storage = Depends(get_storage)) -> User:
    """Resolve the session cookie to a user, or fail with 401."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    user = resolve_session(storage, token)
    if user is None:
        raise UnauthorizedError("Not logged in")
    request.state.user = user
    return user


async def require_login_if_enabled(
    request: Request, storage: Storage = Depends(get_storage)
) -> None:
    """Guard for entity routes; only enforced when REQUIRE_AUTH is on."""
    if request.app.state.require_auth:
        await get_current_user(request, storage)
