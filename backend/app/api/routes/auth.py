"""
Authentication routes for register, login, logout and the current user.
"""
from fastapi import APIRouter, Depends, Request, Response, status
from app.api.dependencies import get_current_user, get_storage
from app.core.config import settings
from app.schemas.user import MessageResponse, User, UserCreate, UserLogin, UserResponse
from app.services.auth_service import (
    authenticate_user,
    end_session,
    register_user,
    start_session,
)
from app.storage.base import Storage

router = APIRouter(tags=["auth"])


def _set_session_cookie(request: Request, response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.COOKIE_SECURE or request.url.scheme == "https",
        samesite="lax",
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    request: Request,
    response: Response,
    storage: Storage = Depends(get_storage)
):
    """Register a new user and log them in."""
    user = register_user(storage, user_data)
    _set_session_cookie(request, response, start_session(storage, user))
    return user


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: UserLogin,
    request: Request,
    response: Response,
    storage: Storage = Depends(get_storage)
):
    """Check credentials and start a session."""
    user = authenticate_user(storage, credentials.username, credentials.password)
    _set_session_cookie(request, response, start_session(storage, user))
    return user


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request, response: Response, storage: Storage = Depends(get_storage)):
    """Destroy the current session, if any."""
    end_session(storage, request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)):
    """Get the logged-in user."""
    return user
