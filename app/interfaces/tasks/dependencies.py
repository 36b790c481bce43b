"""
Dependency injection for tasks.

Wires the MongoDB adapter into the TaskService via constructor injection.
"""

from fastapi import Depends

from app.application.tasks.task_service import TaskService
from app.core.database import DocumentStore
from app.infrastructure.tasks.task_repository import TaskRepositoryAdapter
from app.interfaces.dependencies import get_document_store


def get_task_service(
    store: DocumentStore = Depends(get_document_store),
) -> TaskService:
    """Build TaskService with its infrastructure dependencies."""
    return TaskService(repository=TaskRepositoryAdapter(store=store))
