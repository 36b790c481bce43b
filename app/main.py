"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per resource)
- Error handlers (centralized error-to-envelope mapping)
- Request logging and rate limiting middleware
- Logging configuration
- Document store lifecycle (opened at startup, closed at shutdown)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import settings
from app.core.database import DocumentStore
from app.infrastructure.documents import DOCUMENT_MODELS
from app.interfaces.health import router as health_router
from app.interfaces.tasks.router import router as tasks_router
from app.interfaces.users.router import router as users_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.middleware.request_logging import RequestLoggingMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the document store, close it on shutdown."""
    store = DocumentStore(
        uri=settings.mongodb_uri,
        database_name=settings.get_database_name(),
        document_models=DOCUMENT_MODELS,
    )
    try:
        await store.open()
    except Exception:
        logger.critical("Could not connect to the document store", exc_info=True)
        raise
    app.state.store = store

    yield

    await store.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Request Logging (outermost, sees every request) ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(tasks_router)
    app.include_router(users_router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return f"{settings.project_name} - FastAPI + MongoDB"

    return app


app = create_app()
