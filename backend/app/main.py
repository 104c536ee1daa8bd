"""
FastAPI entrypoint for the Wedding Planner backend application.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.exceptions import (
    WeddingPlannerException,
    app_exception_handler,
    http_exception_handler,
    storage_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.api.dependencies import create_storage
from app.api.router import api_router
from app.storage.base import SessionStore, Storage

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def prune_sessions_forever(session_store: SessionStore, interval_seconds: float) -> None:
    """Remove expired sessions on a fixed interval until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            removed = session_store.prune()
        except Exception:
            logger.exception("Session prune failed")
            continue
        if removed:
            logger.info(f"Pruned {removed} expired sessions")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the session prune loop and stop it on shutdown."""
    interval = settings.SESSION_PRUNE_INTERVAL_HOURS * 60 * 60
    prune_task = asyncio.create_task(
        prune_sessions_forever(app.state.storage.session_store, interval)
    )
    yield
    prune_task.cancel()
    try:
        await prune_task
    except asyncio.CancelledError:
        pass


def create_app(storage: Optional[Storage] = None, require_auth: Optional[bool] = None) -> FastAPI:
    """
    Build the application around an explicit storage backend.

    When ``storage`` is omitted it is created from settings: database storage if
    DATABASE_URL is set, in-memory storage otherwise.
    """
    app = FastAPI(
        title="Wedding Planner API",
        description="Backend API for guests, budget, tasks, vendors, appointments and seating",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else create_storage(settings)
    app.state.require_auth = settings.REQUIRE_AUTH if require_auth is None else require_auth

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WeddingPlannerException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include API routes
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
