"""Pytest configuration and fixtures for simple-task-api tests."""

import json

import pytest
from fastapi.testclient import TestClient

from simple_task_api import TaskAPI, TaskStore, app, set_task_api


@pytest.fixture(autouse=True)
def reset_task_api():
    """Never let a test fall back to the default tasks.json in the working directory."""
    yield
    set_task_api(None)


@pytest.fixture
def tasks_file(tmp_path):
    """Path of the task file for one test."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_file):
    return TaskStore(tasks_file)


@pytest.fixture
def task_api(store):
    """A TaskAPI on a temporary file, installed for both adapters."""
    api = TaskAPI(store)
    set_task_api(api)
    return api


@pytest.fixture
def client(task_api):
    """REST test client bound to the temporary task file."""
    return TestClient(app)


@pytest.fixture
def sample_tasks():
    """Three persisted task records as they appear on disk."""
    return [
        {
            "id": "1738314902417",
            "title": "Buy milk",
            "completed": False,
            "createdAt": "2025-01-31T09:15:02.417Z",
        },
        {
            "id": "1738314910002",
            "title": "Walk the dog",
            "completed": True,
            "createdAt": "2025-01-31T09:15:10.002Z",
        },
        {
            "id": "1738314999999",
            "title": "Call mom",
            "completed": False,
            "createdAt": "2025-01-31T09:16:39.999Z",
        },
    ]


@pytest.fixture
def seeded_file(tasks_file, sample_tasks):
    """Write the sample tasks to the task file."""
    tasks_file.write_text(json.dumps(sample_tasks, indent=2), encoding="utf-8")
    return tasks_file
