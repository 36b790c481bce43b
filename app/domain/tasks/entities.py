"""
Domain entities for tasks.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Task:
    """A to-do item as stored in the document store.

    Attributes:
        id: Store-assigned identity (24-character hex string).
        title: Non-empty, trimmed title.
        description: Optional free text.
        completed: Completion flag.
        created_at: Set by the store on insert.
        updated_at: Refreshed by the store on every write.
    """

    id: str
    title: str
    description: Optional[str]
    completed: bool
    created_at: datetime
    updated_at: datetime
