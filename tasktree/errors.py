"""Exceptions raised by the task collection and its persistence layer."""


class TasksError(Exception):
    """Base class for every recoverable tasktree failure."""


class NoTasksAvailable(TasksError):
    """The collection holds no tasks at all."""

    def __init__(self) -> None:
        super().__init__("no tasks available")


class TaskNotFound(TasksError):
    """No task exists at the requested index."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"couldn't find task with id {task_id}")


class StorageError(TasksError):
    """The tasks file could not be read, parsed or written."""
