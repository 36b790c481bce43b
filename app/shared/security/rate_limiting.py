"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default rate limit on every route.
Router endpoints carry `rate_limited` explicitly; SlowAPIMiddleware only
resolves routes registered directly on the application.
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.shared.responses import send_error
from app.shared.status_codes import StatusCodes

RATE_LIMIT_MESSAGE = "Rate limit exceeded"

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)

rate_limited = limiter.limit(settings.rate_limit_default)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer rate limit violations in the standard envelope.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return send_error(
        f"{RATE_LIMIT_MESSAGE}: {exc.detail}", StatusCodes.TOO_MANY_REQUESTS
    )
