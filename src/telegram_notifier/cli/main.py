"""Command line entry point: run the MCP stdio server or print help topics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError

from ..ext.mcp import MCPServer
from ..foundation.config import TelegramConfig, get_settings
from ..foundation.errors import ConfigurationError
from ..io import TelegramClient
from ..runtime.observability import configure_logging, get_logger
from ..tools import build_registry
from .topics import TOPICS

app = typer.Typer(add_completion=False, help="MCP server that sends Telegram notifications.")

log = get_logger("cli")


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        serve()


@app.command()
def serve() -> None:
    """Run the MCP server on stdin/stdout."""
    try:
        settings = get_settings()
        config = settings.telegram.require_config()
    except (ConfigurationError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    configure_logging(settings.logging.format, settings.logging.level)
    try:
        asyncio.run(_serve(config, settings.http.timeout))
    except KeyboardInterrupt:
        log.info("interrupted")


@app.command("help")
def help_topic(topic: str = typer.Argument("overview", help=f"One of: {', '.join(TOPICS)}")) -> None:
    """Print a help topic."""
    if (text := TOPICS.get(topic.lower())) is None:
        typer.echo(f"Unknown topic '{topic}'. Available: {', '.join(TOPICS)}", err=True)
        raise typer.Exit(code=2)
    typer.echo(text.strip("\n"))


async def _serve(config: TelegramConfig, timeout: float | None) -> None:
    client = TelegramClient(config, timeout=timeout)
    server = MCPServer(build_registry(client), on_close=client.aclose)
    await server.run_stdio()


def main() -> None:
    app(prog_name="telegram-notifier")
