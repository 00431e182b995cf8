"""Utility functions for the simple task API."""

from simple_task_api.utils.formatters import (
    _format_not_found,
    _format_task_json,
    _format_task_list,
    _format_tasks_json,
)
from simple_task_api.utils.parsers import _dump_tasks, _parse_task, _parse_tasks

__all__ = [
    "_parse_task",
    "_parse_tasks",
    "_dump_tasks",
    "_format_task_json",
    "_format_tasks_json",
    "_format_task_list",
    "_format_not_found",
]
