"""
core/validation.py -- Validate request payloads against a pydantic schema.

validate() is the single invocation point for schema validation. It collects
every problem in one pass rather than stopping at the first, and ignores
keys the schema does not declare (unless the schema itself sets
extra="forbid"). Failures come back as Err(ValidationFailed) with one
{"field", "message"} entry per problem, ready for the failure envelope.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.errors import ValidationFailed
from core.result import Err, Ok, Result

ModelT = TypeVar("ModelT", bound=BaseModel)


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def validate(value: Mapping[str, Any] | None, schema: type[ModelT]) -> Result[ModelT, ValidationFailed]:
    """Validate value against schema.

    Returns Ok(model instance) or Err(ValidationFailed) listing every error.
    A missing body (None) is validated as an empty object so required fields
    are reported individually.
    """
    try:
        return Ok(schema.model_validate(dict(value or {})))
    except PydanticValidationError as exc:
        errors = [{"field": _field_path(err["loc"]), "message": err["msg"]} for err in exc.errors()]
        return Err(ValidationFailed(errors))
