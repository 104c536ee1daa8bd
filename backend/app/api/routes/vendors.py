"""
Vendor routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.dependencies import get_storage, require_login_if_enabled
from app.core.exceptions import NotFoundError
from app.schemas.vendor import Vendor, VendorCreate, VendorUpdate
from app.storage.base import Storage

router = APIRouter(
    prefix="/vendors",
    tags=["vendors"],
    dependencies=[Depends(require_login_if_enabled)],
)


@router.get("", response_model=List[Vendor])
async def list_vendors(storage: Storage = Depends(get_storage)):
    """List all vendors."""
    return storage.vendors.list()


@router.get("/{vendor_id}", response_model=Vendor)
async def get_vendor(vendor_id: int, storage: Storage = Depends(get_storage)):
    """Get a vendor by ID."""
    vendor = storage.vendors.get(vendor_id)
    if not vendor:
        raise NotFoundError("Vendor")
    return vendor


@router.post("", response_model=Vendor, status_code=status.HTTP_201_CREATED)
async def create_vendor(vendor_data: VendorCreate, storage: Storage = Depends(get_storage)):
    """Add a vendor."""
    return storage.vendors.create(vendor_data)


@router.patch("/{vendor_id}", response_model=Vendor)
async def update_vendor(
    vendor_id: int,
    vendor_data: VendorUpdate,
    storage: Storage = Depends(get_storage)
):
    """Update only the fields present in the request body."""
    vendor = storage.vendors.update(vendor_id, vendor_data.changes())
    if not vendor:
        raise NotFoundError("Vendor")
    return vendor


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_vendor(vendor_id: int, storage: Storage = Depends(get_storage)):
    """
    Delete a vendor.

    Budget items and appointments that reference it keep their vendorId.
    """
    if not storage.vendors.delete(vendor_id):
        raise NotFoundError("Vendor")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
