"""
Pydantic schemas shared by every router.

Mostly used to document the response envelope in the OpenAPI schema;
the envelopes themselves are produced by app.shared.responses.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Successful response envelope."""

    success: bool = True
    message: str
    data: DataT


class FieldErrorItem(BaseModel):
    """A single rejected field."""

    field: str
    message: str


class ErrorEnvelope(BaseModel):
    """Failure response envelope."""

    success: bool = False
    message: str
    errors: Optional[list[FieldErrorItem]] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope},
    404: {"model": ErrorEnvelope},
    500: {"model": ErrorEnvelope},
}
