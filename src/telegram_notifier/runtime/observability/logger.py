"""Structured key=value logging for the notifier process.

Every renderer writes to stderr: stdout carries the MCP stdio stream and must
only ever contain protocol frames.

Quick Start:
    >>> from telegram_notifier.runtime.observability import get_logger, configure_logging
    >>>
    >>> configure_logging(format="console")  # or "json"
    >>> log = get_logger("telegram.client")
    >>> log.info("request sent", method="sendPhoto")
"""

from __future__ import annotations

import logging
import sys
import time
import traceback
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, TextIO

import orjson

from ...foundation.errors import JsonDict, JsonValue

# Stdlib loggers that would print request URLs, and the URL embeds the bot token
_QUIET_LOGGERS = ("httpx", "httpcore")


@dataclass(slots=True, frozen=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: JsonDict


class _Renderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Logger carrying a fixed context; ``bind()`` returns an extended copy.

    Example:
        >>> log = BoundLogger(context={"logger": "server"})
        >>> log.info("tool invoked", tool="send_telegram_photo")
        # => 10:30:45.120 [info] tool invoked logger="server" tool="send_telegram_photo"
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: _Renderer | None = None
    _level: int | None = None  # None follows the configured level

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return BoundLogger({**self.context, **kw}, self._renderer, self._level)

    def _emit(self, level: int, event: str, kw: JsonDict) -> None:
        threshold = _threshold.get() if self._level is None else self._level
        if level < threshold:
            return
        entry = LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **kw})
        (self._renderer or _current_renderer()).render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.DEBUG, event, kw)

    def info(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.INFO, event, kw)

    def warning(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.WARNING, event, kw)

    def error(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.ERROR, event, kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Error entry with the active traceback under ``exc_info``."""
        self._emit(logging.ERROR, event, {**kw, "exc_info": traceback.format_exc()})


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────

_RESET, _DIM, _BOLD = "\033[0m", "\033[2m", "\033[1m"
_KEY, _STR, _NUM, _ERR = "\033[36m", "\033[33m", "\033[34m", "\033[31m"
_LEVEL_STYLE = {"debug": _DIM, "info": "\033[32m", "warning": _STR, "error": _ERR}


@dataclass(slots=True)
class ConsoleRenderer:
    """``HH:MM:SS.mmm [level] event key=value ...``, colored on a tty."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def _paint(self, style: str, text: str) -> str:
        return f"{style}{text}{_RESET}" if self.colors else text

    def render(self, entry: LogEntry) -> None:
        parts: list[str] = []
        if self.show_timestamp:
            stamp = datetime.fromtimestamp(entry.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
            parts.append(self._paint(_DIM, stamp))
        parts.append(self._paint(_LEVEL_STYLE.get(entry.level, _DIM), f"[{entry.level}]"))
        parts.append(self._paint(_BOLD, entry.event))
        for key in sorted(entry.context):
            if key != "exc_info":
                parts.append(f"{self._paint(_KEY, key)}={self._value(entry.context[key])}")
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(self._paint(_ERR, str(entry.context["exc_info"])), file=self.output)

    def _value(self, v: object) -> str:
        match v:
            case None:
                return self._paint(_DIM, "null")
            case bool():
                return self._paint(_NUM, str(v).lower())
            case int() | float():
                return self._paint(_NUM, str(v))
            case str():
                return self._paint(_STR, f'"{v}"')
            case _:
                return self._paint(_DIM, repr(v))


@dataclass(slots=True)
class JsonRenderer:
    """One JSON object per line."""

    output: TextIO = field(default_factory=lambda: sys.stderr)

    def render(self, entry: LogEntry) -> None:
        record = {
            "timestamp": datetime.fromtimestamp(entry.timestamp, tz=UTC).isoformat(),
            "level": entry.level,
            "event": entry.event,
            **entry.context,
        }
        print(orjson.dumps(record, option=orjson.OPT_NON_STR_KEYS, default=str).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Drops every entry; used by the tests and ``NOTIFIER_LOG_FORMAT=none``."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────

_active: ContextVar[_Renderer | None] = ContextVar("log_renderer", default=None)
_threshold: ContextVar[int] = ContextVar("log_level", default=logging.INFO)


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> _Renderer:
    """Install the process-wide renderer: "console", "json" or "none"."""
    renderer: _Renderer
    match format:
        case "console":
            renderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json":
            renderer = JsonRenderer(output=output or sys.stderr)
        case "none":
            renderer = NoOpRenderer()
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _threshold.set(getattr(logging, level.upper(), logging.INFO))
    _active.set(renderer)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return renderer


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Logger with ``logger=<name>`` bound when a name is given."""
    return BoundLogger(context={**initial_context, **({"logger": name} if name else {})})


def _current_renderer() -> _Renderer:
    if (renderer := _active.get()) is None:
        _active.set(renderer := ConsoleRenderer())
    return renderer
