"""
Beanie documents (MongoDB collections).

These schemas only carry database-level constraints: required fields,
defaults, the unique email index and write timestamps. Input rules
(lengths, trimming, email syntax) live in the interface schemas.
"""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed, Insert, Replace, Save, SaveChanges, before_event
from pydantic import Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedDocument(Document):
    """Base document maintaining created_at/updated_at on every write."""

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @before_event(Insert)
    def stamp_created(self) -> None:
        now = utcnow()
        self.created_at = now
        self.updated_at = now

    @before_event(Replace, Save, SaveChanges)
    def stamp_updated(self) -> None:
        self.updated_at = utcnow()


class TaskDocument(TimestampedDocument):
    title: str
    description: Optional[str] = None
    completed: bool = False

    class Settings:
        name = "tasks"
        validate_on_save = True


class UserDocument(TimestampedDocument):
    name: str
    email: Indexed(str, unique=True)  # type: ignore[valid-type]

    class Settings:
        name = "users"
        validate_on_save = True


DOCUMENT_MODELS = [TaskDocument, UserDocument]
