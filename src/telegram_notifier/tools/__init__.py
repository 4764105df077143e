"""Telegram tools and their registration."""

from __future__ import annotations

from ..foundation.registry import ToolRegistry
from ..io import TelegramClient
from .params import ParseMode, SendDocumentParams, SendMessageParams, SendPhotoParams, SendVideoParams
from .telegram import MediaTool, SendDocumentTool, SendMessageTool, SendPhotoTool, SendVideoTool, TelegramTool

TOOL_CLASSES: tuple[type[TelegramTool], ...] = (SendMessageTool, SendPhotoTool, SendDocumentTool, SendVideoTool)


def register_telegram_tools(registry: ToolRegistry, client: TelegramClient) -> ToolRegistry:
    """Register the four tools, all sharing ``client``."""
    registry.register_all(*(cls(client) for cls in TOOL_CLASSES))
    return registry


def build_registry(client: TelegramClient) -> ToolRegistry:
    return register_telegram_tools(ToolRegistry(), client)


__all__ = [
    "ParseMode", "SendMessageParams", "SendPhotoParams", "SendDocumentParams", "SendVideoParams",
    "TelegramTool", "MediaTool", "SendMessageTool", "SendPhotoTool", "SendDocumentTool", "SendVideoTool",
    "TOOL_CLASSES", "register_telegram_tools", "build_registry",
]
