"""Tests for environment settings and the startup configuration gate."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import SecretStr, ValidationError

from telegram_notifier.foundation.config import (
    DEFAULT_API_BASE,
    NotifierSettings,
    TelegramConfig,
    TelegramSettings,
    clear_settings_cache,
    get_settings,
)
from telegram_notifier.foundation.errors import ConfigurationError


def test_defaults() -> None:
    settings = NotifierSettings()
    assert settings.telegram.bot_token is None
    assert settings.telegram.api_base == DEFAULT_API_BASE
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.http.timeout is None


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "1:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100200300")
    monkeypatch.setenv("NOTIFIER_HTTP_TIMEOUT", "12.5")
    monkeypatch.setenv("NOTIFIER_LOG_LEVEL", "debug")
    monkeypatch.setenv("NOTIFIER_LOG_FORMAT", "JSON")

    settings = NotifierSettings()
    config = settings.telegram.require_config()

    assert config.token.get_secret_value() == "1:abc"
    assert config.chat_id == "-100200300"
    assert settings.http.timeout == 12.5
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"


def test_reads_dotenv_in_working_directory(isolated_env: Path) -> None:
    (isolated_env / ".env").write_text("TELEGRAM_BOT_TOKEN=9:xyz\nTELEGRAM_CHAT_ID=77\nTELEGRAM_API_BASE=http://localhost:8081/\n")
    config = TelegramSettings().require_config()
    assert config.chat_id == "77"
    assert config.api_base == "http://localhost:8081"


def test_missing_token_is_reported_first() -> None:
    with pytest.raises(ConfigurationError, match="^TELEGRAM_BOT_TOKEN environment variable is required$"):
        TelegramSettings().require_config()


def test_missing_chat_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "1:abc")
    with pytest.raises(ConfigurationError, match="^TELEGRAM_CHAT_ID environment variable is required$"):
        TelegramSettings().require_config()


def test_blank_values_count_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "1:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "   ")
    with pytest.raises(ConfigurationError, match="TELEGRAM_CHAT_ID"):
        TelegramSettings().require_config()


def test_invalid_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTIFIER_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        NotifierSettings()


def test_config_is_immutable_and_validated() -> None:
    config = TelegramConfig(token=SecretStr("1:abc"), chat_id="5")
    with pytest.raises(ValidationError):
        config.chat_id = "6"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        TelegramConfig(token=SecretStr(""), chat_id="5")
    with pytest.raises(ValidationError):
        TelegramConfig(token=SecretStr("1:abc"), chat_id="")
    assert "1:abc" not in repr(config)


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    assert get_settings() is first
    monkeypatch.setenv("NOTIFIER_LOG_LEVEL", "ERROR")
    assert get_settings().logging.level == "INFO"
    clear_settings_cache()
    assert get_settings().logging.level == "ERROR"
