"""
Library config from environment with defaults.
Uses pydantic-settings so all env vars are validated and documented in one model.
Parsing never reads these settings; they only drive ambient concerns such as logging.
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3UriSettings(BaseSettings):
    """
    All environment variables used by amazon-s3-uri.
    Env vars are read from os.environ with the S3_URI_ prefix (e.g. S3_URI_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(env_prefix="S3_URI_", extra="ignore")

    # Level used by configure_logging() when no explicit level is passed
    log_level: str = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        name = str(v).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {v!r}")
        return name

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def get_settings() -> S3UriSettings:
    """Return validated settings from current environment."""
    return S3UriSettings()
