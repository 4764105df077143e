"""Topic definitions for the telegram-notifier CLI help system."""

from .overview import OVERVIEW
from .settings import SETTINGS
from .tools import TOOLS

TOPICS: dict[str, str] = {
    "overview": OVERVIEW,
    "tools": TOOLS,
    "settings": SETTINGS,
}

__all__ = ["TOPICS"]
