"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagestrip.config import Settings
from pagestrip.errors import ConfigurationError


def test_defaults(monkeypatch):
    for var in ("PAGESTRIP_REQUEST_TIMEOUT", "PAGESTRIP_USER_AGENT", "PAGESTRIP_FOLLOW_REDIRECTS",
                "PAGESTRIP_OUTPUT_DIR", "PAGESTRIP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    s = Settings()
    assert s.request_timeout is None
    assert s.user_agent.startswith("pagestrip/")
    assert s.follow_redirects is True
    assert s.output_dir == Path(".")
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAGESTRIP_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("PAGESTRIP_USER_AGENT", "custom-agent")
    monkeypatch.setenv("PAGESTRIP_FOLLOW_REDIRECTS", "no")
    monkeypatch.setenv("PAGESTRIP_OUTPUT_DIR", "/tmp/pages")
    monkeypatch.setenv("PAGESTRIP_LOG_LEVEL", "debug")

    s = Settings()
    assert s.request_timeout == 2.5
    assert s.request_headers == {"User-Agent": "custom-agent"}
    assert s.follow_redirects is False
    assert s.output_dir == Path("/tmp/pages")
    assert s.log_level == "DEBUG"


def test_blank_timeout_means_no_timeout(monkeypatch):
    monkeypatch.setenv("PAGESTRIP_REQUEST_TIMEOUT", "  ")
    assert Settings().request_timeout is None


def test_bad_timeout_raises_configuration_error_on_use(monkeypatch):
    monkeypatch.setenv("PAGESTRIP_REQUEST_TIMEOUT", "abc")
    s = Settings()
    with pytest.raises(ConfigurationError, match="PAGESTRIP_REQUEST_TIMEOUT"):
        s.request_timeout
