"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files in the working directory.

Example:
    >>> from telegram_notifier.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> config = settings.telegram.require_config()

    # Or with environment variables:
    # TELEGRAM_BOT_TOKEN=123456:ABC-DEF
    # TELEGRAM_CHAT_ID=-1001234567890
    # NOTIFIER_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError

DEFAULT_API_BASE = "https://api.telegram.org"


class TelegramConfig(BaseModel):
    """Immutable credentials and target for the upstream client.

    Built once at startup by ``TelegramSettings.require_config`` and threaded
    into the client; request handling never reads the environment.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    token: SecretStr
    chat_id: Annotated[str, Field(min_length=1)]
    api_base: Annotated[str, Field(min_length=1)] = DEFAULT_API_BASE

    @field_validator("token")
    @classmethod
    def _token_not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("token must not be empty")
        return v

    @field_validator("api_base")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")


class TelegramSettings(BaseSettings):
    """Bot API credentials (TELEGRAM_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bot_token: SecretStr | None = Field(default=None, description="Bot token issued by @BotFather")
    chat_id: str | None = Field(default=None, description="Chat that receives every notification")
    api_base: str = Field(default=DEFAULT_API_BASE, description="Bot API base URL")

    def require_config(self) -> TelegramConfig:
        """Build the immutable config, or raise ConfigurationError naming the first missing variable."""
        if self.bot_token is None or not self.bot_token.get_secret_value().strip():
            raise ConfigurationError("TELEGRAM_BOT_TOKEN environment variable is required")
        if not (self.chat_id or "").strip():
            raise ConfigurationError("TELEGRAM_CHAT_ID environment variable is required")
        return TelegramConfig(token=self.bot_token, chat_id=self.chat_id, api_base=self.api_base)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NOTIFIER_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v


class HttpSettings(BaseSettings):
    """HTTP client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NOTIFIER_HTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: PositiveFloat | None = Field(default=None, description="Request timeout in seconds; unset keeps the httpx default")


class NotifierSettings(BaseSettings):
    """Root settings for the notifier process.

    Example environment variables:
        TELEGRAM_BOT_TOKEN=123456:ABC-DEF
        TELEGRAM_CHAT_ID=42
        NOTIFIER_HTTP_TIMEOUT=20
        NOTIFIER_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram: TelegramSettings = Field(default_factory=TelegramSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


@lru_cache(maxsize=1)
def get_settings() -> NotifierSettings:
    """Get the global settings instance (cached)."""
    return NotifierSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
