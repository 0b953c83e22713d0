"""
api/limiter.py -- Shared slowapi rate limiter for the link endpoints.

Counters are keyed by client IP and kept in process memory; route modules
attach per-route limits with @limiter.limit(). RATE_LIMIT_ENABLED=false turns
every limit off without touching the routes.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from core.config import get_settings


def build_limiter(enabled: bool | None = None) -> Limiter:
    """Return a Limiter, enabled per Settings.rate_limit_enabled unless overridden."""
    if enabled is None:
        enabled = get_settings().rate_limit_enabled
    return Limiter(key_func=get_remote_address, storage_uri="memory://", enabled=enabled)


# One instance for the whole app: per-module limiters would each count alone.
limiter = build_limiter()
