"""
Port interface for task persistence.

Infrastructure adapters implement this interface.
The domain layer never depends on concrete implementations.

Every method may raise one of the store fault variants from
app.domain.errors. Absence of a record is reported as None.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.domain.tasks.entities import Task


class TaskRepository(ABC):
    """Port for reading and writing tasks."""

    @abstractmethod
    async def list_all(self, newest_first: bool = True) -> list[Task]:
        """Return every task, ordered by creation time."""
        raise NotImplementedError

    @abstractmethod
    async def add(
        self, title: str, description: Optional[str], completed: bool
    ) -> Task:
        """Insert a new task and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, task_id: str) -> Optional[Task]:
        """Return the task with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, task_id: str, changes: dict[str, Any]) -> Optional[Task]:
        """Merge `changes` into the task, validate, persist, return the result.

        Returns None when no task has this id.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, task_id: str) -> Optional[Task]:
        """Remove the task and return it as it was, or None."""
        raise NotImplementedError
