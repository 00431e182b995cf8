"""MCP tool definitions for the simple task API."""

# Import all tools to register them with the MCP server
from simple_task_api.tools.core import (
    complete_task,
    create_task,
    delete_task,
    get_task,
    list_tasks,
)

__all__ = [
    "create_task",
    "list_tasks",
    "get_task",
    "complete_task",
    "delete_task",
]
