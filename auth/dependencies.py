"""
auth/dependencies.py -- FastAPI Depends() helpers for token authentication.

The token is located with auth.resolver.resolve_token() (cookie, then
Authorization, then x-access-token, then token header, then body) and
verified with the process-wide TokenService.

optional_claims() is the soft variant: None for anonymous requests, but an
invalid token is still rejected with 400 rather than silently ignored.
require_claims() additionally raises 401 when no token was presented.

Errors are raised as core.errors.ApiError subclasses; the handler in
api/main.py renders them as failure envelopes.

Layer rule: no imports from api/. This module may import from fastapi
because it is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request

from auth.context import RequestContext
from auth.resolver import resolve_token
from auth.tokens import get_token_service
from core.errors import ApiError


async def get_request_context(request: Request) -> RequestContext:
    """Build the transport-neutral RequestContext for this request."""
    return await RequestContext.from_request(request)


async def optional_claims(request: Request) -> dict[str, Any] | None:
    """Return verified claims, or None when the request carries no token.

    Raises InvalidToken (400) when a token is present but does not verify.
    """
    ctx = await get_request_context(request)
    token = resolve_token(ctx)
    if token is None:
        return None
    return get_token_service().verify(token).unwrap().claims


async def require_claims(request: Request) -> dict[str, Any]:
    """Require a valid token. Raises 401 if none was presented.

    Use as a FastAPI dependency:
        @router.get("/protected")
        async def route(claims: dict = Depends(require_claims)): ...
    """
    claims = await optional_claims(request)
    if claims is None:
        raise ApiError(401, "Authentication required")
    return claims
