"""Upstream I/O."""

from .client import TelegramClient, operation_name

__all__ = ["TelegramClient", "operation_name"]
