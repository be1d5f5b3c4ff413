"""
Personal task tracking with hierarchical subtasks.

Tasks live in an ordered, index-addressed collection, move between inbox,
pending, active and complete, and are exposed to MCP clients as tools.
"""

# Re-export enums and errors
from tasktree.enums import ResponseFormat, Status
from tasktree.errors import NoTasksAvailable, StorageError, TaskNotFound, TasksError

# Re-export models
from tasktree.models import (
    AddSubtaskInput,
    AddTaskInput,
    ClearTasksInput,
    CompleteTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    ModifyTaskInput,
    StartTaskInput,
    StopTaskInput,
    Task,
    TaskCollection,
    TaskUpdate,
)

# Re-export MCP server instance
from tasktree.server import mcp
from tasktree.storage import TaskStore

# Re-export tools
from tasktree.tools import (
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

# Re-export utilities (including private functions used by tests)
from tasktree.utils import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    status_label,
)

__all__ = [
    # Enums
    "Status",
    "ResponseFormat",
    # Errors
    "TasksError",
    "NoTasksAvailable",
    "TaskNotFound",
    "StorageError",
    # Core models
    "Task",
    "TaskUpdate",
    "TaskCollection",
    # Tool input models
    "ListTasksInput",
    "AddTaskInput",
    "AddSubtaskInput",
    "ModifyTaskInput",
    "GetTaskInput",
    "StartTaskInput",
    "StopTaskInput",
    "CompleteTaskInput",
    "DeleteTaskInput",
    "ClearTasksInput",
    # Persistence
    "TaskStore",
    # Formatting
    "status_label",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    # Tools
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
    # MCP server instance
    "mcp",
]
