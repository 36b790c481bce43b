"""
Translation of raw driver/ODM faults into store fault variants.

Every repository call runs inside `translate_store_errors()`, so nothing
above the infrastructure layer ever sees a pymongo, bson or Pydantic
exception coming from the store.
"""

import re
from contextlib import contextmanager
from typing import Iterator, Optional

from beanie import PydanticObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import errors as pymongo_errors

from app.domain.errors import (
    CastError,
    DuplicateKeyError,
    SchemaValidationError,
    StoreError,
)

# e.g. "E11000 duplicate key error collection: todo_app.users index: email_1 dup key: ..."
_INDEX_NAME = re.compile(r"index: (?P<field>[\w.]+?)_-?1\b")


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise store faults from the wrapped block as domain variants."""
    try:
        yield
    except pymongo_errors.DuplicateKeyError as exc:
        raise DuplicateKeyError(duplicate_field(exc)) from exc
    except ValidationError as exc:
        raise SchemaValidationError(schema_messages(exc)) from exc
    except InvalidId as exc:
        raise CastError(str(exc)) from exc
    except pymongo_errors.PyMongoError as exc:
        raise StoreError() from exc


def to_object_id(value: str) -> PydanticObjectId:
    """Cast a client-supplied id. Raises CastError when malformed."""
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise CastError(value) from exc


def duplicate_field(exc: pymongo_errors.DuplicateKeyError) -> Optional[str]:
    """Return the first field named by a duplicate-key error, if any."""
    details = exc.details or {}
    for key in ("keyValue", "keyPattern"):
        payload = details.get(key)
        if isinstance(payload, dict) and payload:
            return str(next(iter(payload)))
    match = _INDEX_NAME.search(str(details.get("errmsg") or exc))
    if match:
        return match.group("field")
    return None


def schema_messages(exc: ValidationError) -> list[str]:
    """One "<path>: <message>" entry per failing field."""
    messages = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        messages.append(f"{path}: {error['msg']}" if path else error["msg"])
    return messages
