"""
Validation gate.

`validate(schema)` builds a FastAPI dependency that checks the request's
body, query string and path parameters against a Pydantic model before
the route runs. The route receives the validated model, with all
normalizing transforms (trim, lowercase) already applied.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import Request
from pydantic import BaseModel, BeforeValidator, ValidationError
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MALFORMED_BODY_MESSAGE = "Malformed JSON body"


@dataclass(frozen=True)
class FieldError:
    """A single failing field: dotted path plus a readable message."""

    field: str
    message: str


class RequestValidationFailed(Exception):
    """Raised when the request does not match its schema."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        super().__init__(f"{len(errors)} invalid field(s)")


class ValidationGateError(Exception):
    """Raised when validation itself breaks (as opposed to rejecting input)."""


def required_text(label: str) -> BeforeValidator:
    """Report a null or non-string value as "<label> is required".

    Matches the message used when the field is missing altogether.
    """

    def check(value: Any) -> Any:
        if not isinstance(value, str):
            raise PydanticCustomError("string_type", f"{label} is required")
        return value

    return BeforeValidator(check)


def validate(schema: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency validating the request against `schema`.

    The schema's top-level fields name the request regions it inspects:
    `body`, `query` and `params`.

    Args:
        schema: Pydantic model describing the three regions.

    Returns:
        An async dependency returning the validated (normalized) model.
    """

    async def dependency(request: Request) -> ModelT:
        regions = {
            "body": await _read_body(request),
            "query": dict(request.query_params),
            "params": dict(request.path_params),
        }
        try:
            return schema.model_validate(regions)
        except ValidationError as exc:
            raise RequestValidationFailed(field_errors(exc.errors())) from exc
        except Exception as exc:
            logger.exception("Validation of %s crashed", schema.__name__)
            raise ValidationGateError(str(exc)) from exc

    return dependency


def field_errors(errors: Any) -> list[FieldError]:
    """Convert Pydantic error dicts into FieldError items."""
    return [
        FieldError(field=".".join(str(part) for part in error["loc"]), message=_message(error))
        for error in errors
    ]


def _message(error: dict[str, Any]) -> str:
    if error.get("type") == "missing" and error.get("loc"):
        name = str(error["loc"][-1]).replace("_", " ")
        return f"{name[:1].upper()}{name[1:]} is required"
    return error.get("msg", "Invalid value")


async def _read_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise RequestValidationFailed(
            [FieldError(field="body", message=MALFORMED_BODY_MESSAGE)]
        ) from exc
