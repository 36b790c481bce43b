"""
Service: task operations.

Input: task ids and CreateTaskCommand / UpdateTaskCommand DTOs.
Output: Task entities, or None when the task does not exist.
Failure cases: store faults (DuplicateKeyError, SchemaValidationError,
CastError, StoreError) propagate unmodified.
"""

import logging
from typing import Optional

from app.application.tasks.dtos import CreateTaskCommand, UpdateTaskCommand
from app.domain.tasks.entities import Task
from app.domain.tasks.ports import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Orchestrates task reads and writes against the TaskRepository port."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    async def list_tasks(self) -> list[Task]:
        """Return all tasks, newest first."""
        return await self._repository.list_all(newest_first=True)

    async def create_task(self, command: CreateTaskCommand) -> Task:
        task = await self._repository.add(
            title=command.title,
            description=command.description,
            completed=command.completed,
        )
        logger.debug("Created task id=%s", task.id)
        return task

    async def get_task(self, task_id: str) -> Optional[Task]:
        return await self._repository.get(task_id)

    async def update_task(
        self, task_id: str, command: UpdateTaskCommand
    ) -> Optional[Task]:
        """Apply the provided fields to the task.

        Args:
            task_id: Identity of the task to update.
            command: Fields to change; omitted fields stay as they are.

        Returns:
            The updated task, or None when no task has this id.
        """
        return await self._repository.update(task_id, command.changes())

    async def delete_task(self, task_id: str) -> Optional[Task]:
        return await self._repository.delete(task_id)

    async def toggle_task(self, task_id: str) -> Optional[Task]:
        """Invert the completion flag of a task.

        This is a read followed by a write. A concurrent update landing
        between the two is overwritten (last write wins).

        Args:
            task_id: Identity of the task to toggle.

        Returns:
            The task with its flipped flag, or None when it does not exist.
        """
        task = await self._repository.get(task_id)
        if task is None:
            return None
        return await self._repository.update(
            task_id, {"completed": not task.completed}
        )
