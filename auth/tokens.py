"""
auth/tokens.py -- Signed bearer tokens and the links that embed them.

Security design decisions:
  JWT: python-jose with HS256. Tokens are signed with SECRET_KEY and carry the
       caller's claims plus iat and (unless eternal) exp. issue() never fails
       for well-formed claims; verify() is the only fallible operation.

  Verification returns Ok(VerifiedToken) | Err(InvalidToken). Every failure
       -- bad signature, malformed token, expiry -- maps to the same
       InvalidToken so clients cannot tell them apart. The real cause is
       logged at DEBUG level only.

  Expiry is checked here against an injectable clock rather than inside jose,
       so tests can move time forward without patching library internals.
       A token is expired once now >= exp.

  Links: verification links for localhost requests append the configured
       port, because local clients may omit it. Reset links use the Host
       header verbatim.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Union
from urllib.parse import urlencode

from jose import jwt
from jose.exceptions import JOSEError

from auth.context import RequestContext
from core.config import get_settings
from core.errors import InvalidToken
from core.result import Err, Ok, Result

logger = logging.getLogger("toolbox.auth")

_ALGORITHM = "HS256"

VERIFY_PATH = "/v1.0/api/auth/verify"
RESET_PASSWORD_PATH = "/v1.0/api/auth/reset-password/email"

# Claims this module adds itself; stripped again from VerifiedToken.claims.
_REGISTERED_CLAIMS = ("iat", "exp")

Expiry = Union[int, float, timedelta, str]

# ---------------------------------------------------------------------------
# Time spans: 60, "90s", "10h", "7d", "2 days", "1.5 hours"
# ---------------------------------------------------------------------------

_SPAN_RE = re.compile(r"^\s*(-?\d*\.?\d+)\s*([a-z]*)\s*$", re.IGNORECASE)

_UNIT_SECONDS: dict[str, float] = {}
for _names, _seconds in (
    (("ms", "msec", "msecs", "millisecond", "milliseconds"), 0.001),
    (("s", "sec", "secs", "second", "seconds"), 1),
    (("m", "min", "mins", "minute", "minutes"), 60),
    (("h", "hr", "hrs", "hour", "hours"), 60 * 60),
    (("d", "day", "days"), 24 * 60 * 60),
    (("w", "week", "weeks"), 7 * 24 * 60 * 60),
    (("y", "yr", "yrs", "year", "years"), 365.25 * 24 * 60 * 60),
):
    for _name in _names:
        _UNIT_SECONDS[_name] = _seconds


def parse_expiry(value: Expiry) -> timedelta:
    """Convert an expiry value into a timedelta.

    Numbers are seconds. Strings are a number followed by an optional unit
    ("90s", "10h", "7d", "2 days"); a bare numeric string is milliseconds.
    Raises ValueError for strings that do not parse.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(seconds=value)
    if isinstance(value, str):
        match = _SPAN_RE.match(value)
        if match:
            amount, unit = match.groups()
            multiplier = _UNIT_SECONDS.get(unit.lower() or "ms")
            if multiplier is not None:
                return timedelta(seconds=float(amount) * multiplier)
    raise ValueError(f"Invalid expiry: {value!r}")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Token service
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VerifiedToken:
    """Decoded contents of a successfully verified token."""

    claims: dict[str, Any]
    issued_at: datetime | None = None
    expires_at: datetime | None = None  # None = eternal token


@dataclass(frozen=True)
class TokenService:
    """Issue and verify HS256 tokens with one secret key.

    Immutable once built; get_token_service() returns the process-wide
    instance configured from Settings. Tests build their own with a fake
    clock.
    """

    secret_key: str = field(repr=False)
    default_expiry: timedelta = timedelta(days=1)
    reset_expiry: timedelta = timedelta(hours=5)
    port: int = 3000
    clock: Callable[[], datetime] = field(default=_utcnow, repr=False, compare=False)

    def _now(self) -> int:
        return int(self.clock().timestamp())

    def _sign(self, claims: Mapping[str, Any], expiry: timedelta | None) -> str:
        now = self._now()
        payload: dict[str, Any] = {**claims, "iat": now}
        if expiry is None:
            payload.pop("exp", None)
        else:
            payload["exp"] = now + int(expiry.total_seconds())
        return jwt.encode(payload, self.secret_key, algorithm=_ALGORITHM)

    def issue(self, claims: Mapping[str, Any], expiry: Expiry | None = None) -> str:
        """Sign claims into a token that expires after expiry (default: 1 day)."""
        span = self.default_expiry if expiry is None else parse_expiry(expiry)
        return self._sign(claims, span)

    def issue_eternal(self, claims: Mapping[str, Any]) -> str:
        """Sign claims into a token with no exp claim.

        Use deliberately: nothing short of rotating SECRET_KEY invalidates it.
        """
        return self._sign(claims, None)

    def verify(self, token: Any) -> Result[VerifiedToken, InvalidToken]:
        """Check signature and expiry. Returns Ok(VerifiedToken) or Err(InvalidToken)."""
        if not isinstance(token, str) or not token:
            logger.debug("Token rejected: not a non-empty string")
            return Err(InvalidToken())
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[_ALGORITHM],
                options={"verify_exp": False, "verify_iat": False},
            )
        except JOSEError as exc:
            logger.debug("Token rejected: %s", exc)
            return Err(InvalidToken())

        exp = payload.get("exp")
        if exp is not None:
            if isinstance(exp, bool) or not isinstance(exp, (int, float)):
                logger.debug("Token rejected: non-numeric exp claim")
                return Err(InvalidToken())
            if self._now() >= exp:
                logger.debug("Token rejected: expired at %s", exp)
                return Err(InvalidToken())

        iat = payload.get("iat")
        claims = {k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS}
        return Ok(
            VerifiedToken(
                claims=claims,
                issued_at=_from_timestamp(iat),
                expires_at=_from_timestamp(exp),
            )
        )

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def build_verification_link(self, ctx: RequestContext, user: Mapping[str, Any]) -> str:
        """Return an email verification link carrying a default-expiry token."""
        token = self.issue({"id": user["id"], "email": user["email"]})
        host = f"{ctx.hostname}:{self.port}" if ctx.hostname == "localhost" else ctx.hostname
        return _link(ctx.scheme, host, VERIFY_PATH, token)

    def build_password_reset_link(self, ctx: RequestContext, user: Mapping[str, Any]) -> str:
        """Return a password reset link carrying a short-lived (5h) token."""
        token = self.issue({"id": user["id"], "email": user["email"]}, self.reset_expiry)
        return _link(ctx.scheme, ctx.host or ctx.hostname, RESET_PASSWORD_PATH, token)


def _from_timestamp(value: Any) -> datetime | None:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return None


def _link(scheme: str, host: str, path: str, token: str) -> str:
    return f"{scheme}://{host}{path}?{urlencode({'token': token})}"


@lru_cache
def get_token_service() -> TokenService:
    """Return the TokenService singleton configured from Settings."""
    settings = get_settings()
    return TokenService(
        secret_key=settings.secret_key,
        default_expiry=timedelta(seconds=settings.token_expire_seconds),
        reset_expiry=timedelta(seconds=settings.reset_token_expire_seconds),
        port=settings.port,
    )
