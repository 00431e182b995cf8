"""Formatting utilities for tool output."""

import json

from simple_task_api.models.task import TaskModel
from simple_task_api.utils.parsers import _dump_tasks


def _format_task_json(task: TaskModel) -> str:
    """
    Format a single task as indented JSON.

    Output:
    {
      "id": "1738314902417",
      "title": "Buy milk",
      "completed": false,
      "createdAt": "2025-01-31T09:15:02.417Z"
    }
    """
    return json.dumps(task.to_wire(), indent=2, ensure_ascii=False)


def _format_tasks_json(tasks: list[TaskModel]) -> str:
    """Format a list of tasks as an indented JSON array."""
    return json.dumps(_dump_tasks(tasks), indent=2, ensure_ascii=False)


def _format_task_list(tasks: list[TaskModel]) -> str:
    """Format the full task list for a tool response."""
    if not tasks:
        return "No tasks found"
    return f"Found {len(tasks)} tasks:\n{_format_tasks_json(tasks)}"


def _format_not_found(task_id: str) -> str:
    return f"Task with ID {task_id} not found"
