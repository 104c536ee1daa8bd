"""
Planning checklist routes.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.dependencies import get_storage, require_login_if_enabled
from app.core.exceptions import NotFoundError
from app.schemas.task import Task, TaskCreate, TaskUpdate
from app.storage.base import Storage

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_login_if_enabled)],
)


@router.get("", response_model=List[Task])
async def list_tasks(storage: Storage = Depends(get_storage)):
    """List all tasks."""
    return storage.tasks.list()


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: int, storage: Storage = Depends(get_storage)):
    """Get a task by ID."""
    task = storage.tasks.get(task_id)
    if not task:
        raise NotFoundError("Task")
    return task


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(task_data: TaskCreate, storage: Storage = Depends(get_storage)):
    """Add a task."""
    return storage.tasks.create(task_data)


@router.patch("/{task_id}", response_model=Task)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    storage: Storage = Depends(get_storage)
):
    """Update only the fields present in the request body."""
    task = storage.tasks.update(task_id, task_data.changes())
    if not task:
        raise NotFoundError("Task")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(task_id: int, storage: Storage = Depends(get_storage)):
    """Delete a task."""
    if not storage.tasks.delete(task_id):
        raise NotFoundError("Task")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
