"""Formatting utilities for task output."""

from datetime import datetime

from tasktree.enums import Status
from tasktree.models.task import Task

STATUS_LABELS: dict[Status, str] = {
    Status.INBOX: "📮 Inbox",
    Status.PENDING: "📅 Pending",
    Status.ACTIVE: "🕑 Active",
    Status.COMPLETE: "📗 Complete",
}


def status_label(status: Status) -> str:
    """Return the fixed display label for a status."""
    return STATUS_LABELS[status]


def _format_datetime(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M")


def _format_task_concise(task: Task, index: int | str) -> str:
    """
    Format a single task in one line.

    Output: "#2: Buy milk [pending] (when:2024-12-31 09:00, +errands)"
    """
    title = task.title[:50] if task.title else "<untitled>"

    # Build compact metadata
    meta = []
    if task.when:
        meta.append(f"when:{_format_datetime(task.when)}")
    if task.deadline:
        meta.append(f"deadline:{_format_datetime(task.deadline)}")
    if task.tags:
        meta.extend(f"+{tag}" for tag in task.tags)
    if task.subtasks:
        meta.append(f"{len(task.subtasks)} subtask(s)")

    line = f"#{index}: {title} [{task.status.value}]"
    if meta:
        return f"{line} ({', '.join(meta)})"
    return line


def _format_tasks_concise(
    tasks: list[Task], title: str | None = None, indices: list[int] | None = None
) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | active
    #0: Task one [active]
    #1: Task two [active]
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    if indices is None:
        indices = list(range(len(tasks)))

    lines = [header]
    for index, task in zip(indices, tasks):
        lines.append(_format_task_concise(task, index))

    return "\n".join(lines)


def _format_subtasks(task: Task, prefix: str, depth: int) -> list[str]:
    lines = []
    indent = "  " * depth
    for i, sub in enumerate(task.subtasks):
        sub_id = f"{prefix}.{i}"
        lines.append(f"{indent}- [{sub_id}] {sub.title} ({status_label(sub.status)})")
        lines.extend(_format_subtasks(sub, sub_id, depth + 1))
    return lines


def _format_task_markdown(task: Task, index: int | str) -> str:
    """Format a single task as markdown, subtasks included."""
    lines = [f"### [{index}] {task.title or '<untitled>'}"]

    details = [f"**Status**: {status_label(task.status)}"]
    if task.when:
        details.append(f"**When**: {_format_datetime(task.when)}")
    if task.deadline:
        details.append(f"**Deadline**: {_format_datetime(task.deadline)}")
    if task.reminder:
        details.append(f"**Reminder**: {_format_datetime(task.reminder)}")
    if task.tags:
        details.append(f"**Tags**: {', '.join(task.tags)}")
    lines.append(" | ".join(details))

    if task.notes:
        lines.append(f"**Notes:** {task.notes}")

    if task.subtasks:
        lines.append("**Subtasks:**")
        lines.extend(_format_subtasks(task, str(index), 0))

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[Task], title: str = "Tasks", indices: list[int] | None = None) -> str:
    """Format a list of tasks as markdown.

    ``indices`` gives each task's position in its collection when the list is
    a filtered subset; by default tasks are numbered from 0.
    """
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    if indices is None:
        indices = list(range(len(tasks)))

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for index, task in zip(indices, tasks):
        lines.append(_format_task_markdown(task, index))
        lines.append("")

    return "\n".join(lines)
