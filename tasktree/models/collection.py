"""Ordered, index-addressed collection of tasks."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from tasktree.errors import NoTasksAvailable, TaskNotFound
from tasktree.models.task import Task

logger = logging.getLogger(__name__)


class TaskCollection(BaseModel):
    """All tasks of one repository, addressed by position.

    ``path`` identifies where the collection lives and is only meaningful to
    the storage layer. Indices follow insertion order and shift down after a
    removal, so they must not be held across one.
    """

    path: str
    tasks: list[Task] = Field(default_factory=list)

    @classmethod
    def new(cls, path: str) -> TaskCollection:
        return cls(path=path)

    def __len__(self) -> int:
        return len(self.tasks)

    def is_empty(self) -> bool:
        return len(self.tasks) == 0

    def task_exists(self, task_id: int) -> bool:
        return 0 <= task_id < len(self.tasks)

    def get_task(self, task_id: int) -> Task:
        """
        Return the live task at ``task_id`` for in-place editing.

        Raises:
            NoTasksAvailable: the collection is empty (checked first)
            TaskNotFound: ``task_id`` is out of range
        """
        if self.is_empty():
            raise NoTasksAvailable()
        if not self.task_exists(task_id):
            raise TaskNotFound(task_id)
        return self.tasks[task_id]

    def push(self, task: Task) -> int:
        self.tasks.append(task)
        logger.debug("Task pushed id=%s title=%r", len(self.tasks) - 1, task.title)
        return len(self.tasks) - 1

    def remove(self, task_id: int) -> Task:
        if not self.task_exists(task_id):
            raise TaskNotFound(task_id)
        task = self.tasks.pop(task_id)
        logger.debug("Task removed id=%s title=%r", task_id, task.title)
        return task

    def clear(self) -> None:
        if self.is_empty():
            raise NoTasksAvailable()
        logger.debug("Collection cleared count=%s", len(self.tasks))
        self.tasks.clear()
