"""
api/envelope.py -- Uniform success/failure JSON envelopes.

Every response body produced by this API has one of two shapes:

    {"status": "success", "data": ...}
    {"status": "fail", "error": {"message": ..., "errors": ...}}

"errors" is left out entirely when there is nothing to report. Route handlers
return success()/failure(); exception handlers in api/main.py build bodies
with failure_body() so raised errors and returned errors look identical.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

DEFAULT_FAILURE_MESSAGE = "Some error occurred while processing your Request"


def success_body(data: Any) -> dict[str, Any]:
    return {"status": "success", "data": jsonable_encoder(data)}


def failure_body(message: str = DEFAULT_FAILURE_MESSAGE, errors: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"message": message}
    if errors is not None:
        error["errors"] = jsonable_encoder(errors)
    return {"status": "fail", "error": error}


def success(data: Any, code: int = 200) -> JSONResponse:
    """Wrap data in a success envelope with the given status code."""
    return JSONResponse(status_code=code, content=success_body(data))


def failure(code: int = 500, message: str = DEFAULT_FAILURE_MESSAGE, errors: Any = None) -> JSONResponse:
    """Wrap an error message (and optional error details) in a failure envelope.

    errors may be a single structured error or a collection.
    """
    return JSONResponse(status_code=code, content=failure_body(message, errors))
