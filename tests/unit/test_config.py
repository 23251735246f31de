"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from github_relay.config import Settings


def test_settings_loads_from_env(monkeypatch: pytest.MonkeyPatch):
    """Test that settings load from environment variables."""
    monkeypatch.setenv("CHAT_BACKEND", "webhook")
    monkeypatch.setenv("CHAT_CHANNEL", "dev")
    monkeypatch.setenv("CHAT_WEBHOOK_URL", "https://chat.example.com/hook")
    monkeypatch.setenv("GITHUB_WEBHOOK_SECRET", "test-secret")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings()

    assert settings.chat_backend == "webhook"
    assert settings.chat_channel == "dev"
    assert settings.chat_webhook_url == "https://chat.example.com/hook"
    assert settings.github_webhook_secret == "test-secret"
    assert settings.port == 9000


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Test default values for optional settings."""
    for key in [
        "CHAT_BACKEND",
        "CHAT_CHANNEL",
        "KEYBASE_COMMAND",
        "CHAT_WEBHOOK_URL",
        "GITHUB_WEBHOOK_SECRET",
        "LOG_LEVEL",
        "HOST",
        "PORT",
    ]:
        monkeypatch.delenv(key, raising=False)

    settings = Settings()

    assert settings.chat_backend == "keybase"
    assert settings.chat_channel == "github"
    assert settings.keybase_command == "keybase"
    assert settings.chat_webhook_url is None
    assert settings.github_webhook_secret is None
    assert settings.log_level == "INFO"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080


def test_settings_rejects_unknown_backend(monkeypatch: pytest.MonkeyPatch):
    """Test that only known chat backends are accepted."""
    monkeypatch.setenv("CHAT_BACKEND", "irc")

    with pytest.raises(ValidationError):
        Settings()
