"""Task operations shared by the REST and MCP adapters."""

import logging
import threading
import time
from datetime import datetime, timezone

from simple_task_api.config import load_settings
from simple_task_api.exceptions import StorageError
from simple_task_api.models.task import TaskModel
from simple_task_api.store import TaskStore

logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _next_task_id(tasks: list[TaskModel]) -> str:
    """
    Generate a millisecond-timestamp id that is unique within ``tasks``.

    If the clock has not advanced past the largest numeric id already
    present, the id is bumped to ``max + 1``.
    """
    candidate = time.time_ns() // 1_000_000
    numeric_ids = [int(t.id) for t in tasks if t.id.isascii() and t.id.isdigit()]
    if numeric_ids and candidate <= max(numeric_ids):
        candidate = max(numeric_ids) + 1
    return str(candidate)


class TaskAPI:
    """
    The five task operations, built directly on a TaskStore.

    Each call loads the full collection, mutates a local copy, and saves it
    back if anything changed. Calls on one instance are serialized by a lock;
    separate processes sharing the same file are not coordinated.

    With ``strict=False`` storage failures are logged and the operation
    carries on (an unreadable file counts as empty, a failed write still
    returns the in-memory result). With ``strict=True`` they raise
    StorageError.
    """

    def __init__(self, store: TaskStore, *, strict: bool = False):
        self.store = store
        self.strict = strict
        self._lock = threading.Lock()

    def _load(self) -> list[TaskModel]:
        try:
            return self.store.load()
        except StorageError:
            logger.exception("Error loading tasks from %s", self.store.path)
            if self.strict:
                raise
            return []

    def _save(self, tasks: list[TaskModel]) -> None:
        try:
            self.store.save(tasks)
        except StorageError:
            logger.exception("Error saving tasks to %s", self.store.path)
            if self.strict:
                raise

    def create_task(self, title: str) -> TaskModel:
        with self._lock:
            tasks = self._load()
            task = TaskModel(
                id=_next_task_id(tasks),
                title=title,
                completed=False,
                created_at=_utc_timestamp(),
            )
            tasks.append(task)
            self._save(tasks)
        logger.info("Created task %s", task.id)
        return task

    def list_tasks(self) -> list[TaskModel]:
        with self._lock:
            return self._load()

    def get_task(self, task_id: str) -> TaskModel | None:
        with self._lock:
            tasks = self._load()
        return next((t for t in tasks if t.id == task_id), None)

    def complete_task(self, task_id: str) -> TaskModel | None:
        """Mark a task completed. Completing an already completed task is a no-op success."""
        with self._lock:
            tasks = self._load()
            task = next((t for t in tasks if t.id == task_id), None)
            if task is None:
                return None
            task.completed = True
            self._save(tasks)
        logger.info("Completed task %s", task_id)
        return task

    def delete_task(self, task_id: str) -> TaskModel | None:
        with self._lock:
            tasks = self._load()
            index = next((i for i, t in enumerate(tasks) if t.id == task_id), None)
            if index is None:
                return None
            deleted = tasks.pop(index)
            self._save(tasks)
        logger.info("Deleted task %s", task_id)
        return deleted


_task_api: TaskAPI | None = None


def get_task_api() -> TaskAPI:
    """Return the process-wide TaskAPI, building it from settings on first use."""
    global _task_api
    if _task_api is None:
        settings = load_settings()
        _task_api = TaskAPI(TaskStore(settings.tasks_file), strict=settings.strict_persistence)
    return _task_api


def set_task_api(task_api: TaskAPI | None) -> None:
    """Install the TaskAPI both adapters use. ``None`` resets to the lazy default."""
    global _task_api
    _task_api = task_api
