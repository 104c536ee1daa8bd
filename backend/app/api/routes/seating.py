"""
Seating chart table routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.dependencies import get_storage, require_login_if_enabled
from app.core.exceptions import NotFoundError
from app.schemas.seating import SeatingPlan, SeatingPlanCreate, SeatingPlanUpdate
from app.storage.base import Storage

router = APIRouter(
    prefix="/seating-plans",
    tags=["seating"],
    dependencies=[Depends(require_login_if_enabled)],
)


@router.get("", response_model=List[SeatingPlan])
async def list_tables(storage: Storage = Depends(get_storage)):
    """List all tables."""
    return storage.seating_plans.list()


@router.get("/{table_id}", response_model=SeatingPlan)
async def get_table(table_id: int, storage: Storage = Depends(get_storage)):
    """Get a table by ID."""
    table = storage.seating_plans.get(table_id)
    if not table:
        raise NotFoundError("Seating plan")
    return table


@router.post("", response_model=SeatingPlan, status_code=status.HTTP_201_CREATED)
async def create_table(table_data: SeatingPlanCreate, storage: Storage = Depends(get_storage)):
    """Add a table."""
    return storage.seating_plans.create(table_data)


@router.patch("/{table_id}", response_model=SeatingPlan)
async def update_table(
    table_id: int,
    table_data: SeatingPlanUpdate,
    storage: Storage = Depends(get_storage)
):
    """Update only the fields present in the request body."""
    table = storage.seating_plans.update(table_id, table_data.changes())
    if not table:
        raise NotFoundError("Seating plan")
    return table


@router.delete("/{table_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_table(table_id: int, storage: Storage = Depends(get_storage)):
    """Delete a table."""
    if not storage.seating_plans.delete(table_id):
        raise NotFoundError("Seating plan")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
