OVERVIEW = """
TOPIC: overview
===============

Telegram Notifier Server (telegram-notifier) is an MCP server that lets an AI
agent send Telegram notifications to one chat through a bot.

HOW IT RUNS:
    The host (Claude Desktop, Cursor, VS Code, ...) starts the process and
    talks MCP over stdin/stdout. Logs go to stderr.

    telegram-notifier              Start the stdio server
    telegram-notifier serve        Same as above
    python -m telegram_notifier    Same as above

HOST CONFIGURATION EXAMPLE:
    {
      "mcpServers": {
        "telegram-notifier": {
          "command": "telegram-notifier",
          "env": {
            "TELEGRAM_BOT_TOKEN": "123456:ABC-DEF...",
            "TELEGRAM_CHAT_ID": "-1001234567890"
          }
        }
      }
    }

FLOW:
    host -> tool params validation -> media reference resolution
         -> JSON or multipart request -> Bot API -> one text answer

RELATED TOPICS:
    telegram-notifier help tools      The four tools and their inputs
    telegram-notifier help settings   Environment variables
"""
