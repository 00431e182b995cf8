"""Core MCP tool definitions for the simple task API."""

from typing import Annotated

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import Field

from simple_task_api.api import TaskAPI, get_task_api
from simple_task_api.exceptions import StorageError
from simple_task_api.server import mcp
from simple_task_api.utils.formatters import (
    _format_not_found,
    _format_task_json,
    _format_task_list,
)


def _api() -> TaskAPI:
    return get_task_api()


@mcp.tool(
    name="create_task",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def create_task(
    title: Annotated[str, Field(description="The title of the task")],
) -> str:
    """
    Create a new task.

    USE THIS WHEN:
    - Adding a new item to track

    DO NOT USE WHEN:
    - Marking an existing task done → use complete_task instead

    Args:
        title: The title of the task (must not be empty)

    Returns:
        Confirmation message with the created task as JSON

    Examples:
        - Simple task: title="Buy milk"
    """
    if not title or not title.strip():
        raise ToolError("Title is required")

    try:
        task = _api().create_task(title.strip())
    except StorageError as e:
        raise ToolError(f"Storage error: {e}") from e

    return f"Task created successfully:\n{_format_task_json(task)}"


@mcp.tool(
    name="list_tasks",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def list_tasks() -> str:
    """
    List all tasks in the order they were created.

    Returns:
        "Found N tasks:" followed by the tasks as a JSON array, or "No tasks found"
    """
    try:
        tasks = _api().list_tasks()
    except StorageError as e:
        raise ToolError(f"Storage error: {e}") from e

    return _format_task_list(tasks)


@mcp.tool(
    name="get_task",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def get_task(
    id: Annotated[str, Field(description="The ID of the task")],
) -> str:
    """
    Get a single task by ID.

    Args:
        id: Task ID as returned by create_task or list_tasks

    Returns:
        The task as JSON
    """
    try:
        task = _api().get_task(id)
    except StorageError as e:
        raise ToolError(f"Storage error: {e}") from e

    if task is None:
        raise ToolError(_format_not_found(id))
    return _format_task_json(task)


@mcp.tool(
    name="complete_task",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def complete_task(
    id: Annotated[str, Field(description="The ID of the task to complete")],
) -> str:
    """
    Mark a task as completed.

    Completing a task that is already completed succeeds and changes nothing.

    Args:
        id: Task ID to complete

    Returns:
        Confirmation message with the updated task as JSON
    """
    try:
        task = _api().complete_task(id)
    except StorageError as e:
        raise ToolError(f"Storage error: {e}") from e

    if task is None:
        raise ToolError(_format_not_found(id))
    return f"Task completed:\n{_format_task_json(task)}"


@mcp.tool(
    name="delete_task",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def delete_task(
    id: Annotated[str, Field(description="The ID of the task to delete")],
) -> str:
    """
    Delete a task permanently.

    Args:
        id: Task ID to delete

    Returns:
        Confirmation message with the deleted task as JSON
    """
    try:
        task = _api().delete_task(id)
    except StorageError as e:
        raise ToolError(f"Storage error: {e}") from e

    if task is None:
        raise ToolError(_format_not_found(id))
    return f"Task deleted:\n{_format_task_json(task)}"
