"""
auth/context.py -- Transport-neutral view of an inbound HTTP request.

The resolver and the link builders only need a handful of request facts:
cookies, headers, the parsed body, the scheme, the hostname and the raw Host
header. RequestContext holds exactly those, so auth/ can be exercised in
tests without spinning up an ASGI app. from_request() builds one from a
Starlette/FastAPI request.

Headers are always stored in a case-insensitive starlette Headers mapping:
"Authorization", "authorization" and "AUTHORIZATION" are the same key.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from starlette.datastructures import Headers
from starlette.requests import Request

logger = logging.getLogger("toolbox.auth")

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@dataclass(frozen=True)
class RequestContext:
    cookies: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Mapping[str, Any] | None = None
    scheme: str = "http"
    hostname: str = "localhost"
    # Raw Host header, port included when the client sent one.
    host: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, Headers):
            object.__setattr__(self, "headers", Headers(headers=dict(self.headers)))

    @classmethod
    async def from_request(cls, request: Request) -> RequestContext:
        """Build a RequestContext from a Starlette request, parsing the body.

        JSON and form bodies become mappings whatever the method, GET
        included; anything else (or an unparseable body) becomes None.
        """
        return cls(
            cookies=dict(request.cookies),
            headers=request.headers,
            body=await _read_body(request),
            scheme=request.url.scheme,
            hostname=request.url.hostname or "",
            host=request.headers.get("host"),
        )


async def _read_body(request: Request) -> Mapping[str, Any] | None:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            parsed = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Ignoring unparseable JSON body on %s", request.url.path)
            return None
        return parsed if isinstance(parsed, Mapping) else None
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return dict(form)
    return None
