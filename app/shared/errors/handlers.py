"""
Centralized error handlers for FastAPI.

Every failure is answered in the standard envelope. Raised faults are
classified by `classify` and written with `send_error`.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import StoreError
from app.shared.errors.classifier import classify
from app.shared.errors.exceptions import AppError
from app.shared.responses import send_error
from app.shared.status_codes import StatusCodes
from app.shared.validation import (
    RequestValidationFailed,
    ValidationGateError,
    field_errors,
)

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
GATE_FAULT_MESSAGE = "An unexpected error occurred during validation"


def _classified_response(exc: object) -> JSONResponse:
    classified = classify(exc)
    return send_error(classified.message, classified.status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationFailed)
    async def handle_validation_failed(
        _request: Request, exc: RequestValidationFailed
    ) -> JSONResponse:
        """Handle requests rejected by the validation gate."""
        return send_error(
            VALIDATION_FAILED_MESSAGE, StatusCodes.BAD_REQUEST, errors=exc.errors
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI's own parameter validation in the same shape."""
        return send_error(
            VALIDATION_FAILED_MESSAGE,
            StatusCodes.BAD_REQUEST,
            errors=field_errors(exc.errors()),
        )

    @app.exception_handler(ValidationGateError)
    async def handle_gate_fault(
        _request: Request, _exc: ValidationGateError
    ) -> JSONResponse:
        """Handle internal faults raised while validating."""
        return send_error(GATE_FAULT_MESSAGE, StatusCodes.INTERNAL_SERVER_ERROR)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors (unknown path, wrong method) and explicit aborts."""
        return _classified_response(exc)

    @app.exception_handler(AppError)
    async def handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        """Handle application errors that carry their own status."""
        return _classified_response(exc)

    @app.exception_handler(StoreError)
    async def handle_store_error(_request: Request, exc: StoreError) -> JSONResponse:
        """Handle document store faults wrapped by the repositories."""
        classified = classify(exc)
        if classified.status_code >= StatusCodes.INTERNAL_SERVER_ERROR:
            logger.error("Document store failure: %s", exc.__cause__ or exc)
        return send_error(classified.message, classified.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for everything else. Never exposes stack traces."""
        classified = classify(exc)
        if classified.status_code >= StatusCodes.INTERNAL_SERVER_ERROR:
            logger.exception("Unexpected error: %s", type(exc).__name__)
        return send_error(classified.message, classified.status_code)
