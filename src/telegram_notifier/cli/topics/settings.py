SETTINGS = """
TOPIC: settings
===============

Configuration comes from environment variables, or a .env file in the
working directory.

REQUIRED:
    TELEGRAM_BOT_TOKEN      Bot token from @BotFather
    TELEGRAM_CHAT_ID        Chat, group or channel id that receives messages

    The server refuses to start without them:
        Error: TELEGRAM_BOT_TOKEN environment variable is required

OPTIONAL:
    TELEGRAM_API_BASE       Bot API base URL (default https://api.telegram.org)
    NOTIFIER_HTTP_TIMEOUT   Request timeout in seconds (default: httpx default)
    NOTIFIER_LOG_LEVEL      DEBUG | INFO | WARNING | ERROR | CRITICAL (default INFO)
    NOTIFIER_LOG_FORMAT     console | json | none (default console)

IN CODE:
    from telegram_notifier.foundation.config import get_settings, clear_settings_cache

    settings = get_settings()
    config = settings.telegram.require_config()  # raises ConfigurationError
    clear_settings_cache()                       # force reload
"""
