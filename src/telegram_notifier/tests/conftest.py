"""Shared fixtures: isolated settings, a fake Bot API and a client wired to it."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from pydantic import SecretStr

from telegram_notifier.foundation.config import TelegramConfig, clear_settings_cache
from telegram_notifier.foundation.registry import ToolRegistry
from telegram_notifier.foundation.testing import FakeTelegramAPI
from telegram_notifier.io import TelegramClient
from telegram_notifier.runtime.observability import configure_logging
from telegram_notifier.tools import build_registry

TOKEN = "123456:TEST-SECRET-TOKEN"
CHAT_ID = "42"

_ENV_VARS = (
    "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID", "TELEGRAM_API_BASE",
    "NOTIFIER_HTTP_TIMEOUT", "NOTIFIER_LOG_LEVEL", "NOTIFIER_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Empty environment, a fresh working directory (no stray .env) and silent logs."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    configure_logging("none")
    yield tmp_path
    clear_settings_cache()


@pytest.fixture
def config() -> TelegramConfig:
    return TelegramConfig(token=SecretStr(TOKEN), chat_id=CHAT_ID)


@pytest.fixture
def fake_api() -> FakeTelegramAPI:
    return FakeTelegramAPI()


@pytest_asyncio.fixture
async def client(config: TelegramConfig, fake_api: FakeTelegramAPI) -> AsyncIterator[TelegramClient]:
    async with TelegramClient(config, transport=fake_api.transport) as c:
        yield c


@pytest.fixture
def registry(client: TelegramClient) -> ToolRegistry:
    return build_registry(client)


@pytest.fixture
def report_file(tmp_path: Path) -> Path:
    path = tmp_path / "raw-export.bin"
    path.write_bytes(b"%PDF-1.4 quarterly numbers")
    return path
