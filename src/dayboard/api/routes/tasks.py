"""
Task endpoints: /api/tasks
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Query

from dayboard.api.deps import CurrentUser, ServiceDep
from dayboard.api.inputs import TaskCreateInput, TaskProgressInput, TaskUpdateInput
from dayboard.api.responses import MessageResponse
from dayboard.models import Task

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
)

DateQuery = Annotated[Optional[str], Query(alias="date", description="YYYY-MM-DD")]


@router.post("", status_code=201, response_model=Task)
async def create_task(params: TaskCreateInput, user: CurrentUser, service: ServiceDep) -> Task:
    """Create a task for a day that has not been ended."""
    return await service.create_task(
        user.id,
        params.title,
        params.total_items,
        params.date,
        description=params.description,
    )


@router.get("", response_model=list[Task])
async def list_tasks(user: CurrentUser, service: ServiceDep, day: DateQuery = None) -> list[Task]:
    """List the caller's tasks, newest first, optionally for one date."""
    return await service.list_tasks(user.id, day)


@router.get("/public/{user_id}", response_model=list[Task])
async def list_public_tasks(user_id: str, service: ServiceDep, day: DateQuery = None) -> list[Task]:
    """List a visible user's tasks."""
    return await service.list_public_tasks(user_id, day)


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    params: TaskUpdateInput,
    user: CurrentUser,
    service: ServiceDep,
) -> Task:
    return await service.update_task(user.id, task_id, params.to_changes())


@router.put("/{task_id}/progress", response_model=Task)
async def update_task_progress(
    task_id: str,
    params: TaskProgressInput,
    user: CurrentUser,
    service: ServiceDep,
) -> Task:
    return await service.update_progress(user.id, task_id, params.completed_items, params.note)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(task_id: str, user: CurrentUser, service: ServiceDep) -> MessageResponse:
    await service.delete_task(user.id, task_id)
    return MessageResponse(message="Task deleted successfully")
