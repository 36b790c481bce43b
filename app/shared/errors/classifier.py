"""
Error classification.

Reduces any raised value to a (message, status code) pair suitable for
a client-facing response. Pure mapping: no logging, no side effects,
never raises.
"""

from dataclasses import dataclass

from app.domain.errors import CastError, DuplicateKeyError, SchemaValidationError
from app.shared.status_codes import StatusCodes

FALLBACK_MESSAGE = "An unexpected error occurred"
VALIDATION_FALLBACK_MESSAGE = "Validation failed"
INVALID_FORMAT_MESSAGE = "Invalid data format"
DUPLICATE_FIELD_FALLBACK = "Record"


@dataclass(frozen=True)
class ClassifiedError:
    """An error reduced to what the client is allowed to see."""

    message: str
    status_code: int


def classify(error: object) -> ClassifiedError:
    """Map an arbitrary error value to a message and HTTP status code.

    The first matching rule wins, since error shapes can overlap
    (store faults are exceptions too, for instance).

    Args:
        error: Whatever was raised. Not necessarily an exception.

    Returns:
        The classified message and status code.
    """
    if isinstance(error, DuplicateKeyError):
        return ClassifiedError(
            message=f"{_capitalize(error.field or DUPLICATE_FIELD_FALLBACK)} already exists",
            status_code=StatusCodes.CONFLICT,
        )

    if isinstance(error, SchemaValidationError):
        messages = [m for m in error.messages if m]
        return ClassifiedError(
            message=", ".join(messages) or VALIDATION_FALLBACK_MESSAGE,
            status_code=StatusCodes.BAD_REQUEST,
        )

    if isinstance(error, CastError):
        return ClassifiedError(
            message=INVALID_FORMAT_MESSAGE,
            status_code=StatusCodes.BAD_REQUEST,
        )

    if isinstance(error, BaseException):
        status_code = _carried_status(error)
        if status_code is not None:
            return ClassifiedError(
                message=_own_message(error),
                status_code=status_code or StatusCodes.INTERNAL_SERVER_ERROR,
            )
        return ClassifiedError(
            message=str(error),
            status_code=StatusCodes.INTERNAL_SERVER_ERROR,
        )

    return ClassifiedError(
        message=FALLBACK_MESSAGE,
        status_code=StatusCodes.INTERNAL_SERVER_ERROR,
    )


def _capitalize(field: str) -> str:
    return field[:1].upper() + field[1:]


def _carried_status(error: BaseException) -> int | None:
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int) and not isinstance(status_code, bool):
        return status_code
    return None


def _own_message(error: BaseException) -> str:
    # AppError exposes `message`, Starlette's HTTPException exposes `detail`.
    for attribute in ("message", "detail"):
        value = getattr(error, attribute, None)
        if isinstance(value, str) and value:
            return value
    return str(error)
