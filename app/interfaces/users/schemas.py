"""
Pydantic schemas for user request/response validation.

Names are trimmed; emails are trimmed and lowercased before their
syntax is checked, so the stored form is always normalized.
"""

from datetime import datetime
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.domain.users.entities import User
from app.shared.validation import required_text

NAME_MIN_LEN = 2
NAME_MAX_LEN = 100


def _clean_name(value: str) -> str:
    value = value.strip()
    if len(value) < NAME_MIN_LEN:
        raise PydanticCustomError(
            "string_too_short", f"Name must be at least {NAME_MIN_LEN} characters"
        )
    if len(value) > NAME_MAX_LEN:
        raise PydanticCustomError(
            "string_too_long", f"Name must not exceed {NAME_MAX_LEN} characters"
        )
    return value


def _clean_email(value: str) -> str:
    value = value.strip().lower()
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as exc:
        raise PydanticCustomError("value_error", "Invalid email format") from exc
    return value


Name = Annotated[str, AfterValidator(_clean_name)]
Email = Annotated[str, AfterValidator(_clean_email)]


class UserIdParams(BaseModel):
    """Path parameters identifying a user."""

    id: str


class CreateUserBody(BaseModel):
    """Body of POST /users."""

    name: Annotated[Name, required_text("Name")]
    email: Annotated[Email, required_text("Email")]


class UpdateUserBody(BaseModel):
    """Body of PUT /users/{id}. Every field is optional."""

    name: Optional[Name] = None
    email: Optional[Email] = None


class CreateUserRequest(BaseModel):
    body: CreateUserBody


class UpdateUserRequest(BaseModel):
    body: UpdateUserBody = Field(default_factory=UpdateUserBody)
    params: UserIdParams


class UserIdRequest(BaseModel):
    params: UserIdParams


class UserResponse(BaseModel):
    """A user as returned to clients (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
