"""
Pydantic schemas for task request/response validation.

Request schemas describe the three request regions checked by the
validation gate (`body`, `params`). Values are normalized (trimmed) as
they are validated. No business logic belongs here.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.domain.tasks.entities import Task
from app.shared.validation import required_text

TITLE_MAX_LEN = 200
DESCRIPTION_MAX_LEN = 1000


def _clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("string_too_short", "Title must not be empty")
    if len(value) > TITLE_MAX_LEN:
        raise PydanticCustomError(
            "string_too_long", f"Title must not exceed {TITLE_MAX_LEN} characters"
        )
    return value


def _clean_description(value: str) -> str:
    value = value.strip()
    if len(value) > DESCRIPTION_MAX_LEN:
        raise PydanticCustomError(
            "string_too_long",
            f"Description must not exceed {DESCRIPTION_MAX_LEN} characters",
        )
    return value


Title = Annotated[str, AfterValidator(_clean_title)]
Description = Annotated[str, AfterValidator(_clean_description)]


class TaskIdParams(BaseModel):
    """Path parameters identifying a task."""

    id: str


class CreateTaskBody(BaseModel):
    """Body of POST /tasks.

    Attributes:
        title: Required, 1-200 characters after trimming.
        description: Optional, at most 1000 characters after trimming.
        completed: Optional boolean, defaults to False.
    """

    title: Annotated[Title, required_text("Title")]
    description: Optional[Description] = None
    completed: StrictBool = False


class UpdateTaskBody(BaseModel):
    """Body of PUT /tasks/{id}. Every field is optional."""

    title: Optional[Title] = None
    description: Optional[Description] = None
    completed: Optional[StrictBool] = None


class CreateTaskRequest(BaseModel):
    body: CreateTaskBody


class UpdateTaskRequest(BaseModel):
    body: UpdateTaskBody = Field(default_factory=UpdateTaskBody)
    params: TaskIdParams


class TaskIdRequest(BaseModel):
    """Request carrying only a task id (get, delete, toggle)."""

    params: TaskIdParams


class TaskResponse(BaseModel):
    """A task as returned to clients (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = None
    completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
