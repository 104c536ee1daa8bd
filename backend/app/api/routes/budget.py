"""
Budget item routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.dependencies import get_storage, require_login_if_enabled
from app.core.exceptions import NotFoundError
from app.schemas.budget import BudgetItem, BudgetItemCreate, BudgetItemUpdate
from app.storage.base import Storage

router = APIRouter(
    prefix="/budget",
    tags=["budget"],
    dependencies=[Depends(require_login_if_enabled)],
)


@router.get("", response_model=List[BudgetItem])
async def list_items(storage: Storage = Depends(get_storage)):
    """List all budget items."""
    return storage.budget_items.list()


@router.get("/{item_id}", response_model=BudgetItem)
async def get_item(item_id: int, storage: Storage = Depends(get_storage)):
    """Get a budget item by ID."""
    item = storage.budget_items.get(item_id)
    if not item:
        raise NotFoundError("Budget item")
    return item


@router.post("", response_model=BudgetItem, status_code=status.HTTP_201_CREATED)
async def create_item(item_data: BudgetItemCreate, storage: Storage = Depends(get_storage)):
    """Add a budget item."""
    return storage.budget_items.create(item_data)


@router.patch("/{item_id}", response_model=BudgetItem)
async def update_item(
    item_id: int,
    item_data: BudgetItemUpdate,
    storage: Storage = Depends(get_storage)
):
    """Update only the fields present in the request body."""
    item = storage.budget_items.update(item_id, item_data.changes())
    if not item:
        raise NotFoundError("Budget item")
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_item(item_id: int, storage: Storage = Depends(get_storage)):
    """Delete a budget item."""
    if not storage.budget_items.delete(item_id):
        raise NotFoundError("Budget item")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
