"""Parser helpers for persisted task data."""

from typing import Any

from simple_task_api.models.task import TaskModel


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: One record from the task file

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse a list of task dictionaries into TaskModel instances.

    Args:
        tasks: Records from the task file, in storage order

    Returns:
        List of TaskModel instances
    """
    return [TaskModel.model_validate(t) for t in tasks]


def _dump_tasks(tasks: list[TaskModel]) -> list[dict[str, Any]]:
    """Dump tasks to plain dictionaries using the wire field names."""
    return [t.to_wire() for t in tasks]
