"""Input models for tasktree MCP tools."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tasktree.enums import ResponseFormat, Status

# ============================================================================
# Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: Status | None = Field(
        default=None,
        description="Only show tasks with this status: inbox, pending, active or complete",
    )
    tag: str | None = Field(default=None, description="Only show tasks carrying this tag")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title (required)", min_length=1, max_length=1000)
    notes: str | None = Field(default=None, description="Free-text notes explaining the task")
    tags: list[str] | None = Field(default=None, description="Tags to organise the task", max_length=20)
    when: datetime | None = Field(default=None, description="When to do the task (ISO 8601)")
    deadline: datetime | None = Field(default=None, description="Latest date the task should be done (ISO 8601)")
    reminder: datetime | None = Field(default=None, description="When a reminder should fire (ISO 8601)")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class AddSubtaskInput(AddTaskInput):
    """Input model for adding a subtask under an existing task."""

    parent_id: int = Field(..., description="Index of the parent task", ge=0)


class ModifyTaskInput(BaseModel):
    """Input model for modifying a task. Omitted fields stay unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="Index of the task to modify", ge=0)
    title: str | None = Field(default=None, description="New title", min_length=1)
    notes: str | None = Field(default=None, description="New notes")
    tags: list[str] | None = Field(default=None, description="Replacement tag list")
    when: datetime | None = Field(default=None, description="New 'when' date-time (ISO 8601)")
    deadline: datetime | None = Field(default=None, description="New deadline (ISO 8601)")
    reminder: datetime | None = Field(default=None, description="New reminder date-time (ISO 8601)")


class TaskIdInput(BaseModel):
    """Input model for tools that act on one task by index."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="Index of the task", ge=0)


class StartTaskInput(TaskIdInput):
    """Input model for starting a task."""


class StopTaskInput(TaskIdInput):
    """Input model for stopping a task."""


class CompleteTaskInput(TaskIdInput):
    """Input model for completing a task."""


class DeleteTaskInput(TaskIdInput):
    """Input model for deleting a task."""


class GetTaskInput(TaskIdInput):
    """Input model for getting a single task."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class ClearTasksInput(BaseModel):
    """Input model for clearing the whole collection."""

    model_config = ConfigDict(str_strip_whitespace=True)
    # No parameters needed - clear is a global operation
