"""Tests for environment-backed settings."""

import pytest

from trip_planner.config import DEFAULT_BASE_URL, DEFAULT_MODEL, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_without_environment(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_BASE_URL", "GEMINI_AUTH_HEADER", "GEMINI_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.gemini_api_key is None
    assert settings.gemini_model == DEFAULT_MODEL
    assert settings.gemini_base_url == DEFAULT_BASE_URL
    assert settings.gemini_auth_header is False
    assert settings.request_timeout is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("GEMINI_BASE_URL", "https://proxy.internal/models/")
    monkeypatch.setenv("GEMINI_AUTH_HEADER", "true")
    monkeypatch.setenv("GEMINI_REQUEST_TIMEOUT", "45")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = get_settings()

    assert settings.gemini_api_key == "env-key"
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.gemini_base_url == "https://proxy.internal/models"
    assert settings.gemini_auth_header is True
    assert settings.request_timeout == 45.0
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert "env-key" not in repr(settings)


def test_invalid_timeout_is_rejected(monkeypatch):
    monkeypatch.setenv("GEMINI_REQUEST_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        get_settings()
