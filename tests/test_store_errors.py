"""
Tests for the translation of raw driver faults into store fault variants.

Raw pymongo / bson / Pydantic exceptions are built by hand; no server needed.
"""

import pytest
from bson.errors import InvalidId
from pydantic import BaseModel, ValidationError
from pymongo import errors as pymongo_errors

from app.domain.errors import (
    CastError,
    DuplicateKeyError,
    SchemaValidationError,
    StoreError,
)
from app.infrastructure.store_errors import (
    duplicate_field,
    to_object_id,
    translate_store_errors,
)
from app.shared.errors.classifier import classify


class _Doc(BaseModel):
    title: str
    completed: bool


def _duplicate(details: dict) -> pymongo_errors.DuplicateKeyError:
    return pymongo_errors.DuplicateKeyError(
        "E11000 duplicate key error", code=11000, details=details
    )


class TestDuplicateKeyTranslation:
    def test_field_from_key_value(self) -> None:
        with pytest.raises(DuplicateKeyError) as info:
            with translate_store_errors():
                raise _duplicate({"keyValue": {"email": "ada@acme.io"}})
        assert info.value.field == "email"
        assert isinstance(info.value.__cause__, pymongo_errors.DuplicateKeyError)

    def test_field_from_key_pattern(self) -> None:
        assert duplicate_field(_duplicate({"keyPattern": {"email": 1}})) == "email"

    def test_field_from_index_name(self) -> None:
        details = {
            "errmsg": "E11000 duplicate key error collection: todo_app.users "
            "index: email_1 dup key: { email: \"ada@acme.io\" }"
        }
        assert duplicate_field(_duplicate(details)) == "email"

    def test_no_field(self) -> None:
        assert duplicate_field(_duplicate({})) is None

    def test_classified_as_conflict(self) -> None:
        with pytest.raises(DuplicateKeyError) as info:
            with translate_store_errors():
                raise _duplicate({"keyValue": {"email": "ada@acme.io"}})
        result = classify(info.value)
        assert (result.message, result.status_code) == ("Email already exists", 409)


class TestSchemaTranslation:
    def test_messages_carry_field_paths(self) -> None:
        with pytest.raises(SchemaValidationError) as info:
            with translate_store_errors():
                _Doc.model_validate({"completed": "maybe"})
        messages = info.value.messages
        assert len(messages) == 2
        assert messages[0].startswith("title: ")
        assert messages[1].startswith("completed: ")
        assert classify(info.value).status_code == 400


class TestCastTranslation:
    def test_invalid_object_id(self) -> None:
        with pytest.raises(CastError):
            to_object_id("not-an-object-id")

    def test_valid_object_id(self) -> None:
        assert str(to_object_id("65a1f0c2e4b0a1b2c3d4e5f6")) == "65a1f0c2e4b0a1b2c3d4e5f6"

    def test_invalid_id_inside_block(self) -> None:
        with pytest.raises(CastError):
            with translate_store_errors():
                raise InvalidId("bad id")


class TestOtherDriverFaults:
    def test_generic_pymongo_error(self) -> None:
        with pytest.raises(StoreError) as info:
            with translate_store_errors():
                raise pymongo_errors.ServerSelectionTimeoutError("no servers")
        assert type(info.value) is StoreError
        assert info.value.message == "Document store operation failed"

    def test_unrelated_errors_pass_through(self) -> None:
        with pytest.raises(KeyError):
            with translate_store_errors():
                raise KeyError("x")
