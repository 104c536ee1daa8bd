"""
Health check route.
"""
from datetime import datetime, timezone
from fastapi import APIRouter
from app.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", time=datetime.now(timezone.utc).isoformat())
