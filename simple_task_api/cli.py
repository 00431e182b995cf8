"""Command-line entry point: choose and start the transport adapter(s)."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import uvicorn

from simple_task_api.api import TaskAPI, set_task_api
from simple_task_api.config import Settings, load_settings
from simple_task_api.enums import ServerMode
from simple_task_api.logging_setup import setup_logging
from simple_task_api.rest import ENDPOINTS, app
from simple_task_api.server import mcp
from simple_task_api.server import run as run_mcp
from simple_task_api.store import TaskStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="simple-task-api",
        description="Task tracking over HTTP REST and MCP. Runs both adapters unless one is selected.",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--http",
        dest="mode",
        action="store_const",
        const=ServerMode.HTTP,
        help="Run only the HTTP REST server",
    )
    mode.add_argument(
        "--mcp",
        dest="mode",
        action="store_const",
        const=ServerMode.MCP,
        help="Run only the MCP stdio server",
    )
    p.set_defaults(mode=ServerMode.BOTH)
    p.add_argument("--host", default=None, help="HTTP bind address (env HOST)")
    p.add_argument("--port", type=int, default=None, help="HTTP port (env PORT, default 3000)")
    p.add_argument("--tasks-file", type=Path, default=None, help="Task storage file (env TASKS_FILE)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (env LOG_LEVEL)",
    )
    return p


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    settings = base if base is not None else load_settings()
    return settings.with_overrides(
        host=args.host,
        port=args.port,
        tasks_file=args.tasks_file,
        log_level=args.log_level,
    )


def _uvicorn_config(settings: Settings) -> uvicorn.Config:
    # log_config=None keeps uvicorn on our stderr handler; its default access
    # log writes to stdout, which the MCP transport owns.
    return uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


def _log_http_banner(settings: Settings) -> None:
    logger.info("HTTP REST API server running on http://%s:%d", settings.host, settings.port)
    for route, description in ENDPOINTS.items():
        logger.info("  %-28s - %s", route, description)


async def _serve_both(settings: Settings) -> None:
    server = uvicorn.Server(_uvicorn_config(settings))
    await asyncio.gather(server.serve(), mcp.run_stdio_async())


def run(mode: ServerMode, settings: Settings) -> None:
    """Start the adapter(s) selected by ``mode`` and block until they stop."""
    set_task_api(TaskAPI(TaskStore(settings.tasks_file), strict=settings.strict_persistence))
    logger.info("Using task file %s (mode: %s)", settings.tasks_file, mode.value)

    if mode.runs_http:
        _log_http_banner(settings)
    if mode.runs_mcp:
        logger.info("MCP server '%s' listening on stdio", mcp.name)

    if mode == ServerMode.HTTP:
        uvicorn.Server(_uvicorn_config(settings)).run()
    elif mode == ServerMode.MCP:
        run_mcp()
    else:
        asyncio.run(_serve_both(settings))


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    setup_logging(settings.log_level)
    run(args.mode, settings)


if __name__ == "__main__":
    main()
