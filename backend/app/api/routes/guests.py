"""
Guest list routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.dependencies import get_storage, require_login_if_enabled
from app.core.exceptions import NotFoundError
from app.schemas.guest import Guest, GuestCreate, GuestUpdate
from app.storage.base import Storage

router = APIRouter(
    prefix="/guests",
    tags=["guests"],
    dependencies=[Depends(require_login_if_enabled)],
)


@router.get("", response_model=List[Guest])
async def list_guests(storage: Storage = Depends(get_storage)):
    """List all guests."""
    return storage.guests.list()


@router.get("/{guest_id}", response_model=Guest)
async def get_guest(guest_id: int, storage: Storage = Depends(get_storage)):
    """Get a guest by ID."""
    guest = storage.guests.get(guest_id)
    if not guest:
        raise NotFoundError("Guest")
    return guest


@router.post("", response_model=Guest, status_code=status.HTTP_201_CREATED)
async def create_guest(guest_data: GuestCreate, storage: Storage = Depends(get_storage)):
    """Add a guest."""
    return storage.guests.create(guest_data)


@router.patch("/{guest_id}", response_model=Guest)
async def update_guest(
    guest_id: int,
    guest_data: GuestUpdate,
    storage: Storage = Depends(get_storage)
):
    """Update only the fields present in the request body."""
    guest = storage.guests.update(guest_id, guest_data.changes())
    if not guest:
        raise NotFoundError("Guest")
    return guest


@router.delete("/{guest_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_guest(guest_id: int, storage: Storage = Depends(get_storage)):
    """Delete a guest."""
    if not storage.guests.delete(guest_id):
        raise NotFoundError("Guest")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
