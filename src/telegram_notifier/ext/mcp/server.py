"""MCP server adapter for the tool registry.

Serves the registry over the MCP stdio transport with the low-level
``mcp`` server: tools are listed from their pydantic schemas and every call
is answered with exactly one text content block, errors included.

Example:
    >>> server = MCPServer(registry)
    >>> await server.run_stdio()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ... import __version__
from ...runtime.observability import get_logger
from .bridge import registry_to_mcp_tools

if TYPE_CHECKING:
    from ...foundation.registry import ToolRegistry

SERVER_NAME = "telegram-notifier"
SERVER_TITLE = "Telegram Notifier Server"

log = get_logger("mcp.server")


# ═══════════════════════════════════════════════════════════════════════════════
# Abstract Server Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class ToolServer(ABC):
    """Abstract base for tool server implementations.

    Subclasses implement a transport adapter; listing and invocation go
    through the shared registry.
    """

    __slots__ = ("_name", "_registry")

    def __init__(self, name: str, registry: ToolRegistry) -> None:
        self._name = name
        self._registry = registry

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> list[types.Tool]:
        return registry_to_mcp_tools(self._registry)

    async def invoke(self, tool_name: str, params: dict[str, object] | None) -> str:
        """Invoke a tool by name. Failures come back as rendered text, never raised."""
        return await self._registry.execute(tool_name, params or {})

    @abstractmethod
    async def run_stdio(self) -> None:
        """Serve until the host closes the stream."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# MCP Adapter
# ═══════════════════════════════════════════════════════════════════════════════


class MCPServer(ToolServer):
    """Low-level MCP server bound to a registry.

    ``on_close`` runs once the transport shuts down, normally or not; the CLI
    uses it to close the pooled HTTP client.
    """

    __slots__ = ("_server", "_on_close")

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        name: str = SERVER_NAME,
        on_close: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        super().__init__(name, registry)
        self._on_close = on_close
        self._server = self._create_server()

    @property
    def server(self) -> Server:
        """Access the underlying mcp Server instance."""
        return self._server

    def _create_server(self) -> Server:
        server: Server = Server(self._name, version=__version__)

        @server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return self.list_tools()

        # Arguments are validated by each tool's params model, which answers
        # in text, so the SDK's schema check is turned off.
        @server.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: dict[str, object] | None) -> list[types.TextContent]:
            return [types.TextContent(type="text", text=await self.invoke(name, arguments))]

        return server

    async def run_stdio(self) -> None:
        log.info("server starting", server=self._name, title=SERVER_TITLE, version=__version__, tools=len(self._registry), transport="stdio")
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self._server.run(read_stream, write_stream, self._server.create_initialization_options())
        finally:
            if self._on_close is not None:
                await self._on_close()
            log.info("server stopped", server=self._name)
