"""MCP tool definitions for tasktree."""

# Import all tools to register them with the MCP server
from tasktree.tools.core import (
    tasktree_add,
    tasktree_add_subtask,
    tasktree_clear,
    tasktree_complete,
    tasktree_delete,
    tasktree_get,
    tasktree_list,
    tasktree_modify,
    tasktree_start,
    tasktree_stop,
)

__all__ = [
    "tasktree_list",
    "tasktree_add",
    "tasktree_add_subtask",
    "tasktree_get",
    "tasktree_modify",
    "tasktree_start",
    "tasktree_stop",
    "tasktree_complete",
    "tasktree_delete",
    "tasktree_clear",
]
