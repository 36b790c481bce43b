"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Optional
from urllib.parse import urlsplit

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_NAME = "todo_app"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes interactive docs).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        mongodb_uri: Connection string for the document store.
        mongodb_database: Explicit database name. Optional.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        rate_limit_enabled: Toggle for the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Task Manager API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 8000

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    def get_database_name(self) -> str:
        """Return the effective database name.

        Priority:
        1. Explicit `MONGODB_DATABASE`
        2. The database path embedded in `MONGODB_URI`
        3. DEFAULT_DATABASE_NAME
        """
        if self.mongodb_database:
            return self.mongodb_database
        database = urlsplit(self.mongodb_uri).path.lstrip("/")
        return database or DEFAULT_DATABASE_NAME


settings = Settings()
