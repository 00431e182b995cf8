"""Whole-collection JSON file storage for tasks."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from simple_task_api.exceptions import StorageError
from simple_task_api.models.task import TaskModel
from simple_task_api.utils.parsers import _dump_tasks, _parse_tasks

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Load and save the full task collection as a single JSON array.

    There is no partial update: ``save`` replaces the file wholesale. A
    missing file is the first-run case and loads as an empty collection.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[TaskModel]:
        """
        Read every task from the file.

        Returns:
            Tasks in storage order, or an empty list if the file does not exist

        Raises:
            StorageError: If the file cannot be read or its contents are malformed
        """
        if not self._path.exists():
            return []

        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {self._path}: {e}", str(self._path)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Failed to parse {self._path}: {e}", str(self._path)) from e

        if not isinstance(data, list):
            raise StorageError(
                f"Failed to parse {self._path}: expected a JSON array, got {type(data).__name__}",
                str(self._path),
            )

        try:
            return _parse_tasks(data)
        except ValidationError as e:
            raise StorageError(f"Invalid task record in {self._path}: {e}", str(self._path)) from e

    def save(self, tasks: list[TaskModel]) -> None:
        """
        Replace the file with ``tasks``.

        The collection is written to a sibling temporary file first and then
        moved over the target, so readers never see a half-written file.

        Raises:
            StorageError: If the file cannot be written
        """
        json_str = json.dumps(_dump_tasks(tasks), indent=2, ensure_ascii=False)
        tmp_path = self._path.with_name(self._path.name + ".tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json_str, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Failed to write {self._path}: {e}", str(self._path)) from e

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
