"""
Adapter: User repository.

Implements the UserRepository port on top of the UserDocument collection.
The unique index on `email` is the only arbiter of email uniqueness.
"""

from typing import Any, Optional

from app.core.database import DocumentStore
from app.domain.users.entities import User
from app.domain.users.ports import UserRepository
from app.infrastructure.documents import UserDocument
from app.infrastructure.store_errors import to_object_id, translate_store_errors


def _to_entity(document: UserDocument) -> User:
    return User(
        id=str(document.id),
        name=document.name,
        email=document.email,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


class UserRepositoryAdapter(UserRepository):
    """MongoDB-backed user persistence.

    Args:
        store: The opened process-wide document store.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def list_all(self) -> list[User]:
        self._store.ensure_open()
        with translate_store_errors():
            documents = await UserDocument.find_all().to_list()
        return [_to_entity(document) for document in documents]

    async def add(self, name: str, email: str) -> User:
        self._store.ensure_open()
        with translate_store_errors():
            document = UserDocument(name=name, email=email)
            await document.insert()
        return _to_entity(document)

    async def get(self, user_id: str) -> Optional[User]:
        self._store.ensure_open()
        object_id = to_object_id(user_id)
        with translate_store_errors():
            document = await UserDocument.get(object_id)
        return _to_entity(document) if document is not None else None

    async def update(self, user_id: str, changes: dict[str, Any]) -> Optional[User]:
        self._store.ensure_open()
        object_id = to_object_id(user_id)
        with translate_store_errors():
            document = await UserDocument.get(object_id)
            if document is None:
                return None
            for field, value in changes.items():
                setattr(document, field, value)
            await document.save()
        return _to_entity(document)

    async def delete(self, user_id: str) -> Optional[User]:
        self._store.ensure_open()
        object_id = to_object_id(user_id)
        with translate_store_errors():
            document = await UserDocument.get(object_id)
            if document is None:
                return None
            result = await document.delete()
        if result is not None and result.deleted_count == 0:
            return None
        return _to_entity(document)
