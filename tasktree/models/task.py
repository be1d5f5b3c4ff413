"""Task entity and its patch request."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from tasktree.enums import Status

logger = logging.getLogger(__name__)


class TaskUpdate(BaseModel):
    """Field update request for Task.apply.

    Every field defaults to None, which means "leave unchanged". There is no
    way to clear a field back to empty through an update.
    """

    title: str | None = None
    notes: str | None = None
    tags: list[str] | None = None
    when: datetime | None = None
    deadline: datetime | None = None
    reminder: datetime | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in type(self).model_fields)


class Task(BaseModel):
    """A single tracked to-do item.

    Status is derived once, when the task is built: Pending if ``when`` is
    set, Inbox otherwise. A status supplied explicitly (as when loading a
    saved file) is kept as is. Later edits never re-derive it.
    """

    title: str
    status: Status = Status.INBOX
    notes: str | None = None
    tags: list[str] | None = None
    subtasks: list[Task] = Field(default_factory=list)
    when: datetime | None = None
    deadline: datetime | None = None
    reminder: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def derive_status(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("status") is None:
            data = dict(data)
            data["status"] = Status.PENDING if data.get("when") is not None else Status.INBOX
        return data

    @classmethod
    def new(
        cls,
        title: str,
        notes: str | None = None,
        tags: list[str] | None = None,
        when: datetime | None = None,
        deadline: datetime | None = None,
        reminder: datetime | None = None,
    ) -> Task:
        return cls(
            title=title,
            notes=notes,
            tags=tags,
            when=when,
            deadline=deadline,
            reminder=reminder,
        )

    def modify(
        self,
        title: str | None = None,
        notes: str | None = None,
        tags: list[str] | None = None,
        when: datetime | None = None,
        deadline: datetime | None = None,
        reminder: datetime | None = None,
    ) -> None:
        """Overwrite each field that is given; absent arguments change nothing."""
        self.apply(
            TaskUpdate(
                title=title,
                notes=notes,
                tags=tags,
                when=when,
                deadline=deadline,
                reminder=reminder,
            )
        )

    def apply(self, update: TaskUpdate) -> None:
        for name in TaskUpdate.model_fields:
            value = getattr(update, name)
            if value is not None:
                setattr(self, name, value)

    # Transitions are unconditional: any status can move to any other.

    def start(self) -> None:
        self.status = Status.ACTIVE
        logger.debug("Task started title=%r", self.title)

    def stop(self) -> None:
        self.status = Status.PENDING if self.when is not None else Status.INBOX
        logger.debug("Task stopped title=%r status=%s", self.title, self.status.value)

    def complete(self) -> None:
        self.status = Status.COMPLETE
        logger.debug("Task completed title=%r", self.title)

    def add_subtask(self, task: Task) -> int:
        """Append an owned subtask and return its index within this task."""
        self.subtasks.append(task)
        return len(self.subtasks) - 1
