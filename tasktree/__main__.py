"""Run the tasktree MCP server with ``python -m tasktree``."""

from tasktree.server import run

run()
