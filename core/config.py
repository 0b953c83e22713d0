"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads happen here. No module should call os.getenv()
or os.environ.get() directly -- import get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. Settings
      are read-only after that, so request handlers on any thread can read
      them without locking.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. secret_key -> SECRET_KEY, port -> PORT).

  @model_validator(mode="after"): Implements the DEBUG-conditional SECRET_KEY
      policy: dev mode generates a key with a warning, production mode refuses
      to start without one.

Security notes:
  [M6] SECRET_KEY shorter than 32 chars is rejected outright. Every token
       issued by auth/tokens.py is an HS256 signature over this key.

  [M7] In production mode (DEBUG not set or false), a missing SECRET_KEY is a
       hard startup failure, never a per-request error.

Layer rule: core/ is the kernel. This module may not import from api/ or auth/.
"""

import logging
import secrets
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("toolbox.config")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields except secret_key have defaults. In tests, set DEBUG=true (or
    SECRET_KEY) before the first get_settings() call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    # Empty string is the sentinel for "not configured". The model_validator
    # below either generates a dev key or raises, so callers never see "".
    secret_key: str = ""
    # Listening port. Verification links built for localhost requests append
    # it explicitly because local clients may omit it from the Host header.
    port: int = Field(default=3000, ge=1, le=65535)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    token_expire_seconds: int = Field(default=24 * 60 * 60, gt=0)  # 1 day
    reset_token_expire_seconds: int = Field(default=5 * 60 * 60, gt=0)  # 5 hours

    # ------------------------------------------------------------------
    # Rate limiting
    # ------------------------------------------------------------------

    verify_rate_limit: str = "30/minute"
    # Off only behind a proxy that already throttles, or in load tests.
    rate_limit_enabled: bool = True

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Enforce SECRET_KEY policy [M7].

        Dev mode (DEBUG=true): auto-generate a random key with a warning.
            Tokens will not survive restart -- acceptable for local dev.

        Production mode: refuse to start if SECRET_KEY is missing.

        Both modes: reject keys shorter than 32 characters [M6].
        """
        if not self.secret_key:
            if self.debug:
                self.secret_key = secrets.token_hex(32)
                logger.warning("WARNING: Using auto-generated SECRET_KEY. Tokens will not verify after a restart.")
            else:
                raise ValueError(
                    "SECRET_KEY is required in production mode. "
                    "Set SECRET_KEY in your environment or .env file. "
                    "To run in development mode, set DEBUG=true."
                )
        if len(self.secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
