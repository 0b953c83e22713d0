"""
API request and response models for the toolbox REST endpoints.

These Pydantic v2 models define the HTTP transport contract. Response bodies
are always wrapped by api.envelope; the *Envelope models below exist so the
OpenAPI schema documents the wrapper shape.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class LinkTokenQuery(BaseModel):
    """Query string of the verification and password reset links."""

    model_config = ConfigDict(str_strip_whitespace=True)

    token: str = Field(min_length=1, description="Token embedded in the emailed link.")


# ---------------------------------------------------------------------------
# Envelope models
# ---------------------------------------------------------------------------


class ErrorBody(BaseModel):
    """The error member of a failure envelope. errors is omitted when absent."""

    model_config = ConfigDict(frozen=True)

    message: str
    errors: Optional[Any] = None


class SuccessEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    data: Any = None


class FailureEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["fail"] = "fail"
    error: ErrorBody


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class LinkIdentity(BaseModel):
    """Identity carried by verification and password reset tokens."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Any
    email: str


class HealthData(BaseModel):
    """Data member for GET /api/v1/health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
