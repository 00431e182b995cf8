"""
Simple task API.

A small task tracker exposing create, list, get, complete and delete over two
transports: an HTTP REST interface (FastAPI) and an MCP tool interface for AI
agents (FastMCP). Both share one task API backed by a single JSON file.
"""

__version__ = "1.0.0"

# Re-export enums and errors
from simple_task_api.enums import ServerMode
from simple_task_api.exceptions import StorageError, TaskAPIError

# Re-export models
from simple_task_api.models import (
    CreateTaskRequest,
    ErrorResponse,
    TaskListResponse,
    TaskModel,
    TaskResponse,
)

# Re-export storage and task operations
from simple_task_api.store import TaskStore
from simple_task_api.api import TaskAPI, get_task_api, set_task_api

# Re-export MCP server instance
from simple_task_api.server import mcp

# Re-export tools
from simple_task_api.tools import (
    complete_task,
    create_task,
    delete_task,
    get_task,
    list_tasks,
)

# Re-export REST application
from simple_task_api.rest import app, create_app

# Re-export utilities (including private functions used by tests)
from simple_task_api.utils import (
    _format_not_found,
    _format_task_json,
    _format_task_list,
    _format_tasks_json,
    _parse_task,
    _parse_tasks,
)

__all__ = [
    "__version__",
    # Enums and errors
    "ServerMode",
    "TaskAPIError",
    "StorageError",
    # Models
    "TaskModel",
    "CreateTaskRequest",
    "TaskResponse",
    "TaskListResponse",
    "ErrorResponse",
    # Storage and task operations
    "TaskStore",
    "TaskAPI",
    "get_task_api",
    "set_task_api",
    # Utility functions
    "_parse_task",
    "_parse_tasks",
    "_format_task_json",
    "_format_tasks_json",
    "_format_task_list",
    "_format_not_found",
    # MCP tools
    "create_task",
    "list_tasks",
    "get_task",
    "complete_task",
    "delete_task",
    # Servers
    "mcp",
    "app",
    "create_app",
]
