"""
Uniform response envelope.

Every endpoint answers with {"success", "message", "data"} on success or
{"success", "message"[, "errors"]} on failure. Routes return exactly one
of these responses per request.
"""

from typing import Any, Optional, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.shared.status_codes import StatusCodes


def send_success(
    data: Any,
    message: str = "Success",
    status_code: int = StatusCodes.OK,
) -> JSONResponse:
    """Build a success envelope around `data`."""
    return JSONResponse(
        status_code=int(status_code),
        content={
            "success": True,
            "message": message,
            "data": jsonable_encoder(data),
        },
    )


def send_error(
    message: str = "Error",
    status_code: int = StatusCodes.BAD_REQUEST,
    errors: Optional[Sequence[Any]] = None,
) -> JSONResponse:
    """Build a failure envelope.

    Args:
        message: Client-facing description of the failure.
        status_code: HTTP status to answer with.
        errors: Optional per-field details, included only when given.
    """
    body: dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = jsonable_encoder(list(errors))
    return JSONResponse(status_code=int(status_code), content=body)
