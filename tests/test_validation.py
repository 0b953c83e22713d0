"""Unit tests for core/validation.py and core/result.py."""

import pytest
from pydantic import BaseModel, Field

from core.errors import ValidationFailed
from core.result import Err, Ok
from core.validation import validate


class SignupBody(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=8)
    age: int


def test_valid_payload_returns_model() -> None:
    result = validate({"email": "a@example.com", "password": "longenough", "age": "30"}, SignupBody)
    assert isinstance(result, Ok)
    assert result.ok is True
    assert result.value.age == 30


def test_unknown_keys_allowed() -> None:
    result = validate({"email": "a@example.com", "password": "longenough", "age": 1, "extra": True}, SignupBody)
    assert isinstance(result, Ok)


def test_collects_every_error() -> None:
    result = validate({"email": "a", "password": "short"}, SignupBody)
    assert isinstance(result, Err)
    assert result.ok is False
    assert isinstance(result.error, ValidationFailed)
    assert result.error.status == 422
    fields = sorted(err["field"] for err in result.error.errors)
    assert fields == ["age", "email", "password"]
    assert all(err["message"] for err in result.error.errors)


def test_none_payload_reports_required_fields() -> None:
    result = validate(None, SignupBody)
    assert isinstance(result, Err)
    assert len(result.error.errors) == 3


def test_unwrap() -> None:
    assert validate({"email": "a@example.com", "password": "longenough", "age": 1}, SignupBody).unwrap().age == 1
    with pytest.raises(ValidationFailed):
        validate({}, SignupBody).unwrap()
