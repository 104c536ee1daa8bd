"""
Application exceptions and the handlers that turn them into JSON responses.
"""
import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.utils import format_error

logger = logging.getLogger(__name__)


class WeddingPlannerException(Exception):
    """Base exception carrying the HTTP status it maps to."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(WeddingPlannerException):
    """Raised when a request targets an unknown identifier."""

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found", status.HTTP_404_NOT_FOUND)
        self.entity = entity


class ConflictError(WeddingPlannerException):
    """Raised when registering a username that is already taken."""

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message, status.HTTP_409_CONFLICT)


class UnauthorizedError(WeddingPlannerException):
    """Raised for missing sessions and bad credentials."""

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)


class StorageError(WeddingPlannerException):
    """Raised when the backing store fails."""

    def __init__(self, message: str = "Storage failure"):
        super().__init__(message)


async def app_exception_handler(request: Request, exc: WeddingPlannerException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=format_error("Internal server error"),
        )
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures are client errors: 400 with the field-level details."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error(jsonable_encoder(errors)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Internal server error"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Internal server error"),
    )
