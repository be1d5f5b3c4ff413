"""Core MCP tool definitions for tasktree."""

import json
import logging

from mcp.types import ToolAnnotations

from tasktree.config import load_settings
from tasktree.enums import ResponseFormat
from tasktree.errors import TasksError
from tasktree.models.inputs import (
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
)
from tasktree.models.task import Task, TaskUpdate
from tasktree.server import mcp
from tasktree.storage import TaskStore
from tasktree.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    status_label,
)

logger = logging.getLogger(__name__)


def _store() -> TaskStore:
    settings = load_settings()
    return TaskStore(settings.repo_path, settings.tasks_file)


def _error(action: str, e: TasksError) -> str:
    logger.warning("%s failed: %s", action, e)
    return f"Error: {e}"


def _task_json(task_id: int, task: Task) -> dict:
    return {"id": task_id, **task.model_dump(mode="json", exclude_none=True)}


@mcp.tool(
    name="tasktree_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasktree_list(params: ListTasksInput) -> str:
    """
    List tasks in the collection, optionally filtered by status or tag.

    USE THIS WHEN:
    - Looking for a task's index before acting on it
    - Reviewing what is in the inbox, pending, active or complete

    DO NOT USE WHEN:
    - You already know the index → use tasktree_get instead

    Args:
        params: ListTasksInput containing status, tag and response_format

    Returns:
        Formatted list of tasks, each shown with its index

    Examples:
        - Everything: params with no filters
        - Active work: params with status="active"
        - Errands: params with tag="errands"
    """
    try:
        collection = _store().load()
    except TasksError as e:
        return _error("list", e)

    matches = [
        (i, task)
        for i, task in enumerate(collection.tasks)
        if (params.status is None or task.status == params.status)
        and (params.tag is None or params.tag in (task.tags or []))
    ]
    indices = [i for i, _ in matches]
    tasks = [task for _, task in matches]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": len(collection),
                "count": len(tasks),
                "tasks": [_task_json(i, t) for i, t in matches],
            },
            indent=2,
        )

    filters = []
    if params.status is not None:
        filters.append(params.status.value)
    if params.tag:
        filters.append(f"+{params.tag}")

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, " ".join(filters) or None, indices)

    title = "Tasks"
    if filters:
        title = f"Tasks ({' '.join(filters)})"
    return _format_tasks_markdown(tasks, title, indices)


@mcp.tool(
    name="tasktree_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasktree_add(params: AddTaskInput) -> str:
    """
    Create a new task at the end of the collection.

    The task starts in the inbox, or as pending when a 'when' date is given.

    Args:
        params: AddTaskInput containing the title and optional attributes

    Returns:
        Confirmation message with the new task's index

    Examples:
        - Simple task: params with title="Buy milk"
        - Scheduled task: params with title="Dentist", when="2025-03-01T09:00"
        - Tagged task: params with title="Call mom", tags=["personal"]
    """
    task = Task.new(
        params.title,
        notes=params.notes,
        tags=params.tags,
        when=params.when,
        deadline=params.deadline,
        reminder=params.reminder,
    )
    try:
        with _store().session() as collection:
            task_id = collection.push(task)
    except TasksError as e:
        return _error("add", e)

    return f"Task {task_id} created: {task.title} ({status_label(task.status)})"


@mcp.tool(
    name="tasktree_add_subtask",
    annotations=ToolAnnotations(
        title="Add Subtask",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasktree_add_subtask(params: AddSubtaskInput) -> str:
    """
    Create a subtask under an existing task.

    Args:
        params: AddSubtaskInput containing parent_id, the title and optional attributes

    Returns:
        Confirmation message with the subtask's dotted index

    Examples:
        - params with parent_id=0, title="Compare prices"
    """
    subtask = Task.new(
        params.title,
        notes=params.notes,
        tags=params.tags,
        when=params.when,
        deadline=params.deadline,
        reminder=params.reminder,
    )
    try:
        with _store().session() as collection:
            parent = collection.get_task(params.parent_id)
            sub_id = parent.add_subtask(subtask)
    except TasksError as e:
        return _error("add_subtask", e)

    return f"Subtask {params.parent_id}.{sub_id} created under '{parent.title}': {subtask.title}"


@mcp.tool(
    name="tasktree_get",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasktree_get(params: GetTaskInput) -> str:
    """
    Show one task, with its subtasks, by index.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Formatted task details
    """
    try:
        task = _store().load().get_task(params.task_id)
    except TasksError as e:
        return _error("get", e)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(_task_json(params.task_id, task), indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task, params.task_id)
    return _format_task_markdown(task, params.task_id)


@mcp.tool(
    name="tasktree_modify",
    annotations=ToolAnnotations(
        title="Modify Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasktree_modify(params: ModifyTaskInput) -> str:
    """
    Update an existing task's fields.

    Only the fields given are changed; omitted fields keep their value.
    Fields cannot be cleared. Status is not affected: use tasktree_start,
    tasktree_stop or tasktree_complete for that.

    Args:
        params: ModifyTaskInput containing task_id and the fields to change

    Returns:
        Confirmation message

    Examples:
        - Rename: params with task_id=2, title="Buy oat milk"
        - Reschedule: params with task_id=2, when="2025-03-02T18:00"
        - Retag: params with task_id=2, tags=["errands", "weekend"]
    """
    update = TaskUpdate(**params.model_dump(exclude={"task_id"}))
    try:
        with _store().session() as collection:
            task = collection.get_task(params.task_id)
            task.apply(update)
    except TasksError as e:
        return _error("modify", e)

    if update.is_empty():
        return f"No changes given for task {params.task_id}."
    return f"Task {params.task_id} modified: {task.title}"


@mcp.tool(
    name="tasktree_start",
    annotations=ToolAnnotations(
        title="Start Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasktree_start(params: StartTaskInput) -> str:
    """
    Start working on a task, making it active.

    Works from any status, including complete.

    Args:
        params: StartTaskInput containing the task_id to start

    Returns:
        Confirmation message
    """
    try:
        with _store().session() as collection:
            task = collection.get_task(params.task_id)
            task.start()
    except TasksError as e:
        return _error("start", e)

    return f"Task {params.task_id} started: {task.title} ({status_label(task.status)})"


@mcp.tool(
    name="tasktree_stop",
    annotations=ToolAnnotations(
        title="Stop Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasktree_stop(params: StopTaskInput) -> str:
    """
    Stop working on a task.

    The task goes back to pending if it has a 'when' date, otherwise to the inbox.

    Args:
        params: StopTaskInput containing the task_id to stop

    Returns:
        Confirmation message
    """
    try:
        with _store().session() as collection:
            task = collection.get_task(params.task_id)
            task.stop()
    except TasksError as e:
        return _error("stop", e)

    return f"Task {params.task_id} stopped: {task.title} ({status_label(task.status)})"


@mcp.tool(
    name="tasktree_complete",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasktree_complete(params: CompleteTaskInput) -> str:
    """
    Mark a task as complete.

    Args:
        params: CompleteTaskInput containing the task_id to complete

    Returns:
        Confirmation message
    """
    try:
        with _store().session() as collection:
            task = collection.get_task(params.task_id)
            task.complete()
    except TasksError as e:
        return _error("complete", e)

    return f"Task {params.task_id} marked as complete: {task.title}"


@mcp.tool(
    name="tasktree_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasktree_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task and its subtasks.

    Tasks after it move down by one index, so list again before acting on
    another task by index.

    Args:
        params: DeleteTaskInput containing the task_id to delete

    Returns:
        Confirmation message
    """
    try:
        with _store().session() as collection:
            task = collection.remove(params.task_id)
    except TasksError as e:
        return _error("delete", e)

    return f"Task {params.task_id} deleted: {task.title}"


@mcp.tool(
    name="tasktree_clear",
    annotations=ToolAnnotations(
        title="Clear Tasks",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasktree_clear(params: ClearTasksInput) -> str:
    """
    Delete every task in the collection.

    Args:
        params: ClearTasksInput (no parameters)

    Returns:
        Confirmation message with the number of tasks removed
    """
    try:
        with _store().session() as collection:
            count = len(collection)
            collection.clear()
    except TasksError as e:
        return _error("clear", e)

    return f"Cleared {count} task(s)."
