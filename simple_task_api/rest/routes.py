"""Task routes for the REST adapter."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError

from simple_task_api.api import TaskAPI, get_task_api
from simple_task_api.models.inputs import (
    CreateTaskRequest,
    ErrorResponse,
    TaskListResponse,
    TaskResponse,
)

TASK_NOT_FOUND = "Task not found"
TITLE_REQUIRED = "Title is required"

router = APIRouter(prefix="/tasks", tags=["Tasks"])

_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=TaskListResponse)
def list_tasks(api: TaskAPI = Depends(get_task_api)) -> TaskListResponse:
    """List all tasks."""
    tasks = api.list_tasks()
    return TaskListResponse(data=tasks, count=len(tasks))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_task(
    payload: Any = Body(default=None),
    api: TaskAPI = Depends(get_task_api),
) -> TaskResponse:
    """Create a task. The body must carry a non-empty ``title``."""
    # Any body other than an object with a non-empty string title is the same 400.
    try:
        request = CreateTaskRequest.model_validate(payload if isinstance(payload, dict) else {})
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=TITLE_REQUIRED) from None

    return TaskResponse(data=api.create_task(request.title))


@router.get("/{task_id}", response_model=TaskResponse, responses=_not_found)
def get_task(task_id: str, api: TaskAPI = Depends(get_task_api)) -> TaskResponse:
    """Get a single task by ID."""
    task = api.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return TaskResponse(data=task)


@router.patch("/{task_id}/complete", response_model=TaskResponse, responses=_not_found)
def complete_task(task_id: str, api: TaskAPI = Depends(get_task_api)) -> TaskResponse:
    """Mark a task as completed."""
    task = api.complete_task(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return TaskResponse(data=task)


@router.delete("/{task_id}", response_model=TaskResponse, responses=_not_found)
def delete_task(task_id: str, api: TaskAPI = Depends(get_task_api)) -> TaskResponse:
    """Delete a task and return the removed record."""
    task = api.delete_task(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return TaskResponse(data=task)
