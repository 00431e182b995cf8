"""Enums for the simple task API."""

from enum import Enum


class ServerMode(str, Enum):
    """Which transport adapter(s) the process runs."""

    HTTP = "http"  # REST adapter only
    MCP = "mcp"  # MCP stdio tool adapter only
    BOTH = "both"  # Both adapters on one event loop (default)

    @property
    def runs_http(self) -> bool:
        return self in (ServerMode.HTTP, ServerMode.BOTH)

    @property
    def runs_mcp(self) -> bool:
        return self in (ServerMode.MCP, ServerMode.BOTH)
