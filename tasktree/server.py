"""FastMCP server initialization for tasktree."""

import logging

from mcp.server.fastmcp import FastMCP

from tasktree.config import load_settings
from tasktree.logging_setup import setup_logging

logger = logging.getLogger(__name__)

# Initialize the MCP server
mcp = FastMCP("tasktree")


def run() -> None:
    """Run the MCP server."""
    settings = load_settings()
    setup_logging(settings.log_level)

    # Register the tools before serving.
    import tasktree.tools  # noqa: F401

    logger.info("Starting tasktree server tasks=%s", settings.tasks_path)
    mcp.run()

