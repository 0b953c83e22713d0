"""
api/main.py -- FastAPI application entry point.

Run with:  uvicorn asgi:app --reload

Middleware stack (outermost to innermost):
  1. log_requests       -- one log line per request with latency
  2. SlowAPIMiddleware  -- enforces per-route rate limits from api.limiter

Lifespan loads Settings once at startup so a missing or short SECRET_KEY
stops the process before it serves a single request.

Every response body -- including errors raised anywhere in the stack -- is
a success or failure envelope from api.envelope.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException

from api.envelope import failure, success
from api.limiter import limiter
from api.models import HealthData
from api.routes.v1.auth import router as auth_router
from auth.tokens import get_token_service
from core.config import get_settings
from core.errors import ApiError

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("toolbox.api")

# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate configuration on startup.

    get_settings() raises ValueError on bad configuration; letting it escape
    here aborts startup. get_token_service() is warmed so the first request
    does not pay for building it.
    """
    settings = get_settings()
    get_token_service()
    logger.info("API starting up (port=%d, debug=%s)", settings.port, settings.debug)

    yield

    logger.info("API shutdown complete")


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title="API Toolbox",
    description="Token, credential and response-envelope primitives for HTTP APIs.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(SlowAPIMiddleware)

# SlowAPI looks for app.state.limiter by convention.
app.state.limiter = limiter

# ---------------------------------------------------------------------------
# Request logging middleware
# ---------------------------------------------------------------------------


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Router registration
# ---------------------------------------------------------------------------

app.include_router(auth_router, prefix="/v1.0/api", tags=["Auth"])

# ---------------------------------------------------------------------------
# Exception handlers
#
# All handlers return the failure envelope so clients parse every error the
# same way.
# ---------------------------------------------------------------------------


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render ApiError (InvalidToken, ValidationFailed, ...) as a failure envelope."""
    return failure(code=exc.status, message=exc.message, errors=exc.errors)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 with Retry-After when a rate limit is exceeded."""
    retry_after = int(getattr(exc, "retry_after", 60))
    response = failure(code=429, message="Too many requests.", errors=str(exc.detail))
    response.headers["Retry-After"] = str(retry_after)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 listing every field that failed FastAPI's own validation."""
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return failure(code=422, message="Validation failed", errors=errors)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Render FastAPI/Starlette HTTP exceptions (404, 405, ...) as failure envelopes."""
    if isinstance(exc.detail, str):
        return failure(code=exc.status_code, message=exc.detail)
    return failure(code=exc.status_code, message=f"HTTP {exc.status_code}", errors=exc.detail)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected server errors.

    The traceback goes to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return failure(code=500)


# ---------------------------------------------------------------------------
# Health endpoint
#
# Defined directly in main.py so it is reachable regardless of router
# registration. Not rate-limited.
# ---------------------------------------------------------------------------


@app.get("/api/v1/health", tags=["Health"])
async def health() -> JSONResponse:
    """Return API liveness and current version."""
    return success(HealthData(version=__version__))
