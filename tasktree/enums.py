"""Enums for tasktree."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class Status(str, Enum):
    """Lifecycle status of a task.

    The set is closed and carries no ordering. Transitions happen through the
    task's own methods (start/stop/complete), never by comparing values.
    """

    INBOX = "inbox"
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETE = "complete"
