"""Pydantic models for tasktree."""

from tasktree.models.collection import TaskCollection
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
    TaskIdInput,
)
from tasktree.models.task import Task, TaskUpdate

__all__ = [
    # Core models
    "Task",
    "TaskUpdate",
    "TaskCollection",
    # Tool input models
    "ListTasksInput",
    "AddTaskInput",
    "AddSubtaskInput",
    "ModifyTaskInput",
    "TaskIdInput",
    "StartTaskInput",
    "StopTaskInput",
    "CompleteTaskInput",
    "DeleteTaskInput",
    "GetTaskInput",
    "ClearTasksInput",
]
