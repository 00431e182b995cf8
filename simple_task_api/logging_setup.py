"""Logging configuration for the simple task API."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger to write to stderr only.

    stdout carries the MCP stdio transport, so nothing may log there.
    Calling this again replaces the previous handler instead of stacking.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
