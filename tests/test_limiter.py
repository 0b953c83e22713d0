"""Unit tests for api/limiter.py -- limiter construction from Settings."""

import pytest

from api.limiter import build_limiter, limiter
from core.config import get_settings


def test_shared_limiter_follows_settings() -> None:
    assert limiter.enabled is get_settings().rate_limit_enabled


def test_explicit_override() -> None:
    assert build_limiter(enabled=False).enabled is False
    assert build_limiter(enabled=True).enabled is True


def test_default_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings(), "rate_limit_enabled", False)
    assert build_limiter().enabled is False
