"""
core/result.py -- Ok | Err discriminated result for fallible operations.

Token verification and payload validation return a Result instead of raising,
so callers branch on the outcome explicitly:

    result = service.verify(token)
    if isinstance(result, Err):
        return failure(code=result.error.status, message=result.error.message)
    claims = result.value.claims

Route dependencies that want exception flow call result.unwrap(), which
raises the carried ApiError for the exception handler to render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from core.errors import ApiError

T = TypeVar("T")
E = TypeVar("E", bound=ApiError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err[E]]
