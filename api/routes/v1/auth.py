"""
api/routes/v1/auth.py -- Landing endpoints for emailed links and token introspection.

Routes (mounted under /v1.0/api):
  GET /auth/verify?token=...                -- target of verification links
  GET /auth/reset-password/email?token=...  -- target of password reset links
  GET /auth/me                              -- claims of the caller's token

The link endpoints only prove that the token is genuine and unexpired and
echo its identity; marking an account verified or accepting a new password
belongs to the user store, which this layer does not own.

Security:
  [H2] Link endpoints are rate-limited (Settings.verify_rate_limit, per IP)
       to slow down token guessing.
  All verification failures share one InvalidToken response (400).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.envelope import success
from api.limiter import limiter
from api.models import FailureEnvelope, LinkIdentity, LinkTokenQuery, SuccessEnvelope
from auth.dependencies import require_claims
from auth.tokens import get_token_service
from core.config import get_settings
from core.errors import InvalidToken
from core.validation import validate

router = APIRouter()

_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": FailureEnvelope, "description": "Invalid Token"},
    422: {"model": FailureEnvelope, "description": "Missing token"},
}


def _verify_link(request: Request) -> LinkIdentity:
    """Validate the ?token= query, verify it, and check it names an identity."""
    query = validate(dict(request.query_params), LinkTokenQuery).unwrap()
    verified = get_token_service().verify(query.token).unwrap()
    identity = validate(verified.claims, LinkIdentity)
    if not identity.ok:
        # Genuine token, but not one minted for a link.
        raise InvalidToken()
    return identity.value


@limiter.limit(lambda: get_settings().verify_rate_limit)
@router.get("/auth/verify", response_model=SuccessEnvelope, responses=_RESPONSES)
async def verify_email(request: Request) -> JSONResponse:
    """Accept an email verification link token and return its identity."""
    return success(_verify_link(request))


@limiter.limit(lambda: get_settings().verify_rate_limit)
@router.get("/auth/reset-password/email", response_model=SuccessEnvelope, responses=_RESPONSES)
async def reset_password_email(request: Request) -> JSONResponse:
    """Accept a password reset link token and return its identity."""
    return success(_verify_link(request))


@router.get("/auth/me", response_model=SuccessEnvelope, responses={401: {"model": FailureEnvelope}})
async def me(claims: dict[str, Any] = Depends(require_claims)) -> JSONResponse:
    """Return the claims of the token presented with the request."""
    return success(claims)
