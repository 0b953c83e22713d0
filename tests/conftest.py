"""
tests/conftest.py -- Shared test fixtures.

This module provides:
  - FakeClock / clock: a settable clock for simulating the passage of time
  - token_service: a TokenService wired to the test secret and the fake clock
  - fast_hashing: lowers bcrypt's cost factor so hashing-heavy tests stay fast
  - api_client: TestClient over the real FastAPI app

SECRET_KEY and DEBUG must be set before any core/auth import so
get_settings() never raises for a missing key.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import datetime, timedelta, timezone

# CRITICAL: set before any core/auth import.
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")

import pytest
from fastapi.testclient import TestClient

from api.limiter import limiter
from api.main import app
from auth.tokens import TokenService
from core.config import get_settings

TEST_SECRET = "test-secret-key-that-is-at-least-32-characters"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_service(clock: FakeClock) -> TokenService:
    return TokenService(secret_key=TEST_SECRET, port=3000, clock=clock)


@pytest.fixture
def fast_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the minimum bcrypt cost factor for the duration of a test."""
    monkeypatch.setattr("auth.passwords.BCRYPT_ROUNDS", 4)


@pytest.fixture(scope="module")
def api_client() -> Generator[TestClient, None, None]:
    """Yield a TestClient over the real app with fresh rate-limit counters."""
    limiter.reset()
    with TestClient(app, raise_server_exceptions=True) as client:
        yield client
    limiter.reset()


@pytest.fixture
def settings():
    return get_settings()
