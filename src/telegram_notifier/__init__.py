"""telegram-notifier: an MCP server that sends Telegram notifications.

Exposes four tools (text message, photo, document, video) to an AI-agent
host over the MCP stdio transport and forwards each call to the Telegram
Bot API.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
