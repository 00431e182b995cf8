"""REST adapter for the simple task API."""

from simple_task_api.rest.app import ENDPOINTS, app, create_app

__all__ = ["app", "create_app", "ENDPOINTS"]
