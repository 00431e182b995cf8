"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_LOG_LEVEL = "INFO"

TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Process-wide settings. Built once at startup; CLI flags may override."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    tasks_file: Path = Path(DEFAULT_TASKS_FILE)
    log_level: str = DEFAULT_LOG_LEVEL
    strict_persistence: bool = False

    def with_overrides(self, **changes: object) -> Settings:
        """Return a copy with every non-None value in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(*, use_dotenv: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Recognised variables: PORT, HOST, TASKS_FILE, LOG_LEVEL,
    TASK_API_STRICT_PERSISTENCE. Blank or unparseable values fall back to the
    defaults.
    """
    if use_dotenv:
        load_dotenv(override=False)

    env = {k: v.strip() for k, v in os.environ.items()}

    port = DEFAULT_PORT
    if env.get("PORT", "").isdecimal():
        port = int(env["PORT"])

    log_level = env.get("LOG_LEVEL", "").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL

    tasks_file = Path(env.get("TASKS_FILE") or DEFAULT_TASKS_FILE).expanduser()

    return Settings(
        host=env.get("HOST") or DEFAULT_HOST,
        port=port,
        tasks_file=tasks_file,
        log_level=log_level,
        strict_persistence=env.get("TASK_API_STRICT_PERSISTENCE", "").lower() in TRUTHY,
    )
