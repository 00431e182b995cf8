"""FastMCP server initialization for the simple task API."""

from mcp.server.fastmcp import FastMCP

SERVER_NAME = "simple-task-api"

# Initialize the MCP server
mcp = FastMCP(SERVER_NAME)


def run() -> None:
    """Run the MCP server over stdio."""
    mcp.run()


if __name__ == "__main__":
    run()
