"""
Adapter: Task repository.

Implements the TaskRepository port on top of the TaskDocument collection.
Documents are converted to Task entities before leaving this module.
"""

from typing import Any, Optional

from app.core.database import DocumentStore
from app.domain.tasks.entities import Task
from app.domain.tasks.ports import TaskRepository
from app.infrastructure.documents import TaskDocument
from app.infrastructure.store_errors import to_object_id, translate_store_errors


def _to_entity(document: TaskDocument) -> Task:
    return Task(
        id=str(document.id),
        title=document.title,
        description=document.description,
        completed=document.completed,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


class TaskRepositoryAdapter(TaskRepository):
    """MongoDB-backed task persistence.

    Args:
        store: The opened process-wide document store.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def list_all(self, newest_first: bool = True) -> list[Task]:
        self._store.ensure_open()
        order = "-created_at" if newest_first else "+created_at"
        with translate_store_errors():
            documents = await TaskDocument.find_all().sort(order).to_list()
        return [_to_entity(document) for document in documents]

    async def add(
        self, title: str, description: Optional[str], completed: bool
    ) -> Task:
        self._store.ensure_open()
        with translate_store_errors():
            document = TaskDocument(
                title=title, description=description, completed=completed
            )
            await document.insert()
        return _to_entity(document)

    async def get(self, task_id: str) -> Optional[Task]:
        self._store.ensure_open()
        object_id = to_object_id(task_id)
        with translate_store_errors():
            document = await TaskDocument.get(object_id)
        return _to_entity(document) if document is not None else None

    async def update(self, task_id: str, changes: dict[str, Any]) -> Optional[Task]:
        """Merge changes and save; the document is re-validated on save."""
        self._store.ensure_open()
        object_id = to_object_id(task_id)
        with translate_store_errors():
            document = await TaskDocument.get(object_id)
            if document is None:
                return None
            for field, value in changes.items():
                setattr(document, field, value)
            await document.save()
        return _to_entity(document)

    async def delete(self, task_id: str) -> Optional[Task]:
        self._store.ensure_open()
        object_id = to_object_id(task_id)
        with translate_store_errors():
            document = await TaskDocument.get(object_id)
            if document is None:
                return None
            result = await document.delete()
        # Removed by someone else between the read and the delete.
        if result is not None and result.deleted_count == 0:
            return None
        return _to_entity(document)
