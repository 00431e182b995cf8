"""Exception types for the simple task API."""


class TaskAPIError(Exception):
    """Base class for errors raised by the task API."""


class StorageError(TaskAPIError):
    """The task file could not be read, parsed, or written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
