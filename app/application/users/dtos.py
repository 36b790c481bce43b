"""
Data Transfer Objects for the user service.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a user.

    Attributes:
        name: Trimmed display name (2-100 characters).
        email: Trimmed, lowercased email address.
    """

    name: str
    email: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for a partial user update. None means "leave unchanged"."""

    name: Optional[str] = None
    email: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided."""
        provided = {"name": self.name, "email": self.email}
        return {key: value for key, value in provided.items() if value is not None}
