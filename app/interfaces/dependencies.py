"""
Dependency providers shared by every resource.
"""

from fastapi import Request

from app.core.database import DocumentStore
from app.domain.errors import StoreUnavailableError


def get_document_store(request: Request) -> DocumentStore:
    """Return the store opened by the application lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailableError()
    return store
