"""
Document store fault variants.

Repositories wrap every raw driver/ODM fault into exactly one of these
classes right after the store call, so callers deal with a closed set of
error shapes instead of probing driver exceptions.
No framework imports allowed.
"""

from typing import Optional


class StoreError(Exception):
    """Base error for all document store faults."""

    def __init__(self, message: str = "Document store operation failed") -> None:
        self.message = message
        super().__init__(self.message)


class DuplicateKeyError(StoreError):
    """Raised when a write violates a unique index.

    Attributes:
        field: Name of the offending field, when the store reports one.
    """

    def __init__(self, field: Optional[str] = None) -> None:
        super().__init__(f"Duplicate value for unique field: {field or 'unknown'}")
        self.field = field


class SchemaValidationError(StoreError):
    """Raised when a document fails validation on write.

    Attributes:
        messages: One message per failing field.
    """

    def __init__(self, messages: list[str]) -> None:
        super().__init__("Document validation failed")
        self.messages = messages


class CastError(StoreError):
    """Raised when a value cannot be cast to the stored type (e.g. a malformed id)."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Cannot cast value: {value!r}")
        self.value = value


class StoreUnavailableError(StoreError):
    """Raised when a repository is used while the store client is closed."""

    def __init__(self) -> None:
        super().__init__("Document store is not connected")
