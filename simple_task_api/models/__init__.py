"""Pydantic models for the simple task API."""

from simple_task_api.models.inputs import (
    CreateTaskRequest,
    ErrorResponse,
    TaskListResponse,
    TaskResponse,
)
from simple_task_api.models.task import TaskModel

__all__ = [
    # Task model
    "TaskModel",
    # REST request/response models
    "CreateTaskRequest",
    "TaskResponse",
    "TaskListResponse",
    "ErrorResponse",
]
