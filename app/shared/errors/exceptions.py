"""
Application errors that carry their own HTTP status code.

Raise these from any layer when the status is known up front; the
error classifier passes their message and status through unchanged.
"""

from app.shared.status_codes import StatusCodes


class AppError(Exception):
    """Base error for application-specific failures."""

    def __init__(
        self,
        message: str,
        status_code: int = StatusCodes.INTERNAL_SERVER_ERROR,
    ) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(message, StatusCodes.BAD_REQUEST)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, StatusCodes.UNAUTHORIZED)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, StatusCodes.FORBIDDEN)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, StatusCodes.NOT_FOUND)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, StatusCodes.CONFLICT)
