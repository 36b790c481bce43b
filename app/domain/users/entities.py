"""
Domain entities for users.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Store-assigned identity (24-character hex string).
        name: Trimmed display name.
        email: Trimmed, lowercased address. Unique across users.
        created_at: Set by the store on insert.
        updated_at: Refreshed by the store on every write.
    """

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
