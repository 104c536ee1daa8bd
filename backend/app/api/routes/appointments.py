"""
Appointment routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.dependencies import get_storage, require_login_if_enabled
from app.core.exceptions import NotFoundError
from app.schemas.appointment import Appointment, AppointmentCreate, AppointmentUpdate
from app.storage.base import Storage

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
    dependencies=[Depends(require_login_if_enabled)],
)


@router.get("", response_model=List[Appointment])
async def list_appointments(storage: Storage = Depends(get_storage)):
    """List all appointments."""
    return storage.appointments.list()


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(
    appointment_id: int,
    storage: Storage = Depends(get_storage)
):
    """Get an appointment by ID."""
    appointment = storage.appointments.get(appointment_id)
    if not appointment:
        raise NotFoundError("Appointment")
    return appointment


@router.post("", response_model=Appointment, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment_data: AppointmentCreate,
    storage: Storage = Depends(get_storage)
):
    """Add an appointment."""
    return storage.appointments.create(appointment_data)


@router.patch("/{appointment_id}", response_model=Appointment)
async def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    storage: Storage = Depends(get_storage)
):
    """Update only the fields present in the request body."""
    appointment = storage.appointments.update(appointment_id, appointment_data.changes())
    if not appointment:
        raise NotFoundError("Appointment")
    return appointment


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_appointment(
    appointment_id: int,
    storage: Storage = Depends(get_storage)
):
    """Delete an appointment."""
    if not storage.appointments.delete(appointment_id):
        raise NotFoundError("Appointment")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
