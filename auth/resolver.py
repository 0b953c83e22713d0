"""
auth/resolver.py -- Find the candidate token on an inbound request.

Token carriers are checked in a fixed priority order:
  1. Cookie "token"                -- browser sessions.
  2. Authorization header          -- "Bearer <token>" or a bare token.
  3. x-access-token header         -- legacy API clients.
  4. token header
  5. Body field "token"            -- form posts.

Each carrier is one extractor function in TOKEN_EXTRACTORS; resolve_token()
walks the chain and stops at the first non-empty string. Nothing here
verifies the token -- that is auth.tokens.TokenService.verify(). A request
with no token resolves to None, which is a normal outcome for anonymous
requests.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from auth.context import RequestContext

Extractor = Callable[[RequestContext], Any]


def from_cookie(ctx: RequestContext) -> Any:
    return ctx.cookies.get("token")


def from_authorization(ctx: RequestContext) -> Any:
    """Return the segment after the scheme ("Bearer abc" -> "abc").

    A header without a usable second segment is returned whole.
    """
    value = ctx.headers.get("authorization")
    if not value:
        return None
    parts = value.split(" ")
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return value


def from_access_token_header(ctx: RequestContext) -> Any:
    return ctx.headers.get("x-access-token")


def from_token_header(ctx: RequestContext) -> Any:
    return ctx.headers.get("token")


def from_body(ctx: RequestContext) -> Any:
    if ctx.body is None:
        return None
    return ctx.body.get("token")


TOKEN_EXTRACTORS: tuple[Extractor, ...] = (
    from_cookie,
    from_authorization,
    from_access_token_header,
    from_token_header,
    from_body,
)


def resolve_token(ctx: RequestContext, extractors: Sequence[Extractor] = TOKEN_EXTRACTORS) -> str | None:
    """Return the first non-empty token string found on the request, or None."""
    for extract in extractors:
        candidate = extract(ctx)
        if isinstance(candidate, str) and candidate:
            return candidate
    return None
