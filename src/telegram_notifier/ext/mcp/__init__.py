"""MCP integration: tool definitions and the stdio server."""

from .bridge import get_tool_schema, registry_to_mcp_tools, to_mcp_tool
from .server import SERVER_NAME, SERVER_TITLE, MCPServer, ToolServer

__all__ = [
    "get_tool_schema", "to_mcp_tool", "registry_to_mcp_tools",
    "SERVER_NAME", "SERVER_TITLE", "MCPServer", "ToolServer",
]
