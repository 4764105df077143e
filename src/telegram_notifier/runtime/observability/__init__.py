"""Observability: structured logging to stderr."""

from .logger import BoundLogger, ConsoleRenderer, JsonRenderer, NoOpRenderer, configure_logging, get_logger

__all__ = ["BoundLogger", "ConsoleRenderer", "JsonRenderer", "NoOpRenderer", "configure_logging", "get_logger"]
