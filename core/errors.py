"""
core/errors.py -- Error kinds shared by auth/ and api/.

ApiError mirrors the failure envelope's error body (message + optional
errors) and carries the HTTP status the API layer should respond with. The
exception handler in api/main.py renders any ApiError through
api.envelope.failure(), so raising one from a dependency or route is enough.

Layer rule: no imports from api/ or auth/.
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """An error that is safe to show to API clients as-is."""

    def __init__(self, status: int, message: str, errors: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.errors = errors

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class InvalidToken(ApiError):
    """Token verification failed.

    The message is fixed: bad signature, malformed token and expiry all look
    the same to clients.
    """

    MESSAGE = "Invalid Token"

    def __init__(self) -> None:
        super().__init__(400, self.MESSAGE)


class ValidationFailed(ApiError):
    """A request payload did not satisfy its schema.

    errors is a list of {"field": ..., "message": ...} dicts, one per problem.
    """

    MESSAGE = "Validation failed"

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(422, self.MESSAGE, errors)
