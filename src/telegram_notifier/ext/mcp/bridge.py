"""Convert registry tools into MCP tool definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp import types

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ...foundation.core import BaseTool
    from ...foundation.registry import ToolRegistry


def get_tool_schema(tool: BaseTool[BaseModel]) -> dict[str, object]:
    """JSON schema of the tool's params, keyed by wire (alias) names.

    Pydantic titles are stripped from the root and from every property.
    """
    schema = tool.params_schema.model_json_schema(by_alias=True)
    schema.pop("title", None)
    schema.pop("$defs", None)
    schema["properties"] = {
        name: {k: v for k, v in prop.items() if k != "title"}
        for name, prop in schema.get("properties", {}).items()
    }
    return schema


def to_mcp_tool(tool: BaseTool[BaseModel]) -> types.Tool:
    meta = tool.metadata
    return types.Tool(name=meta.name, title=meta.title, description=meta.description, inputSchema=get_tool_schema(tool))


def registry_to_mcp_tools(registry: ToolRegistry) -> list[types.Tool]:
    """MCP definitions for every registered tool, in registration order."""
    return [to_mcp_tool(tool) for tool in registry]
