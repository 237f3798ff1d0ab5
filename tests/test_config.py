"""Tests for environment-driven settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from amazon_s3_uri import S3UriSettings, configure_logging, get_settings
from amazon_s3_uri import logging_config


def test_log_level_default_is_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("S3_URI_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_level_number == logging.WARNING


def test_log_level_read_from_env_and_upper_cased(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("S3_URI_LOG_LEVEL", "  debug ")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == logging.DEBUG


def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("S3_URI_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError, match="unknown log level"):
        S3UriSettings()


def test_unprefixed_env_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("S3_URI_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert get_settings().log_level == "WARNING"


class TestConfigureLogging:
    """configure_logging passes the shared format and resolved level to basicConfig."""

    def _capture(self, monkeypatch: pytest.MonkeyPatch) -> dict:
        calls: dict = {}

        def fake_basic_config(**kwargs: object) -> None:
            calls.update(kwargs)

        monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)
        return calls

    def test_explicit_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = self._capture(monkeypatch)
        configure_logging(logging.INFO)
        assert calls == {
            "level": logging.INFO,
            "format": logging_config.LOG_FORMAT,
            "datefmt": logging_config.LOG_DATEFMT,
        }

    def test_level_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = self._capture(monkeypatch)
        monkeypatch.setenv("S3_URI_LOG_LEVEL", "error")
        configure_logging()
        assert calls["level"] == logging.ERROR
