"""Request and response models for the REST adapter."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simple_task_api.models.task import TaskModel

# ============================================================================
# Request Models
# ============================================================================


class CreateTaskRequest(BaseModel):
    """Body of ``POST /tasks``."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="The title of the task", min_length=1)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v.strip()


# ============================================================================
# Response Envelopes
# ============================================================================


class TaskResponse(BaseModel):
    """Envelope for a single task."""

    success: bool = True
    data: TaskModel


class TaskListResponse(BaseModel):
    """Envelope for the full task list."""

    success: bool = True
    data: list[TaskModel]
    count: int


class ErrorResponse(BaseModel):
    """Envelope for every error returned by the REST adapter."""

    success: bool = False
    error: str
