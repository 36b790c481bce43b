"""
Port interface for user persistence.

Email uniqueness is enforced by the store itself: a conflicting write
raises DuplicateKeyError, implementations never check-then-insert.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for reading and writing users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user in insertion order."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, name: str, email: str) -> User:
        """Insert a new user. Raises DuplicateKeyError on a taken email."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, user_id: str, changes: dict[str, Any]) -> Optional[User]:
        """Merge `changes` into the user and persist. None when absent."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, user_id: str) -> Optional[User]:
        """Remove the user and return it as it was, or None."""
        raise NotImplementedError
