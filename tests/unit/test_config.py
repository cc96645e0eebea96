"""Tests for Settings and get_settings."""

import pytest

from foodtrace.core.config import ApiSettings, Settings, get_settings
from foodtrace.core.exceptions import ConfigurationError
from foodtrace.web.app import load_settings

_ENV_VARS = ("API__BASE_URL", "API__TIMEOUT", "API__VERIFY_SSL", "AUTH__TOKEN", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    """Settings has the documented defaults when nothing is configured."""
    settings = Settings(_env_file=None)
    assert settings.api.base_url == "http://localhost:8000"
    assert settings.api.timeout is None
    assert settings.api.verify_ssl is True
    assert settings.auth.token == ""
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_settings_read_from_env(clean_env) -> None:
    """Nested env vars use the __ delimiter."""
    clean_env.setenv("API__BASE_URL", "https://backend.example.com/")
    clean_env.setenv("API__TIMEOUT", "12.5")
    clean_env.setenv("AUTH__TOKEN", "secret-token")
    settings = get_settings()
    assert settings.api.base_url == "https://backend.example.com"
    assert settings.api.timeout == 12.5
    assert settings.auth.token == "secret-token"


def test_get_settings_is_cached(clean_env) -> None:
    """get_settings returns the same object until the cache is cleared."""
    first = get_settings()
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings() is not first


def test_base_url_strips_trailing_slash() -> None:
    assert ApiSettings(base_url="http://localhost:8000/").base_url == "http://localhost:8000"


def test_invalid_base_url() -> None:
    """Invalid base_url raises ValueError."""
    with pytest.raises(ValueError, match="http:// or https://"):
        ApiSettings(base_url="ftp://invalid.com")


def test_invalid_timeout() -> None:
    """Non-positive timeout raises ValueError."""
    with pytest.raises(ValueError, match="timeout"):
        ApiSettings(timeout=0)
    with pytest.raises(ValueError, match="timeout"):
        ApiSettings(timeout=-1)


def test_load_settings_wraps_validation_errors(clean_env) -> None:
    """Bad environment surfaces as ConfigurationError at startup."""
    clean_env.setenv("API__BASE_URL", "ftp://invalid.com")
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_settings()
