"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import (
    auth, health, guests, budget, tasks,
    vendors, appointments, seating, settings
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(guests.router)
api_router.include_router(budget.router)
api_router.include_router(tasks.router)
api_router.include_router(vendors.router)
api_router.include_router(appointments.router)
api_router.include_router(seating.router)
api_router.include_router(settings.router)
