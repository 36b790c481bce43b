"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and whether
the document store is connected.
"""

from fastapi import APIRouter, Request

from app.core.config import settings
from app.interfaces.schemas import HealthResponse
from app.shared.security.rate_limiting import rate_limited

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
@rate_limited
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    store = getattr(request.app.state, "store", None)
    connected = store is not None and store.is_open
    return HealthResponse(
        status="ok",
        version=settings.version,
        database="connected" if connected else "disconnected",
    )
