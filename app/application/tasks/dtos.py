"""
Data Transfer Objects for the task service.

DTOs carry already-validated, normalized input from the interface layer.
They are plain dataclasses with no behavior beyond listing their changes.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CreateTaskCommand:
    """Input DTO for creating a task.

    Attributes:
        title: Trimmed, non-empty title.
        description: Optional trimmed description.
        completed: Initial completion flag.
    """

    title: str
    description: Optional[str] = None
    completed: bool = False


@dataclass(frozen=True)
class UpdateTaskCommand:
    """Input DTO for a partial task update. None means "leave unchanged"."""

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided."""
        provided = {
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }
        return {key: value for key, value in provided.items() if value is not None}
