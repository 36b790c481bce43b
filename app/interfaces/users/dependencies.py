"""
Dependency injection for users.
"""

from fastapi import Depends

from app.application.users.user_service import UserService
from app.core.database import DocumentStore
from app.infrastructure.users.user_repository import UserRepositoryAdapter
from app.interfaces.dependencies import get_document_store


def get_user_service(
    store: DocumentStore = Depends(get_document_store),
) -> UserService:
    """Build UserService with its infrastructure dependencies."""
    return UserService(repository=UserRepositoryAdapter(store=store))
