"""Central registry for tool lookup and execution.

The registry provides:
- Tool registration and lookup by name
- Parameter validation against each tool's pydantic schema
- A single boundary where every failure becomes a rendered text answer
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ValidationError

from ...runtime.observability import get_logger
from ..core import BaseTool, ToolMetadata
from ..errors import ErrorCode, ToolError, format_validation_error

log = get_logger("registry")


class ToolRegistry:
    """Central registry for all available tools.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(SendMessageTool(client))
        >>> text = await registry.execute("send_markdown_message_as_telegram_bot", {"messageText": "*hi*"})
    """

    __slots__ = ("_tools",)

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool[BaseModel]] = {}

    def register(self, tool: BaseTool[BaseModel]) -> None:
        """Register a tool instance. Names are unique."""
        name = tool.metadata.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered.")
        self._tools[name] = tool

    def register_all(self, *tools: BaseTool[BaseModel]) -> None:
        for tool in tools:
            self.register(tool)

    def get(self, name: str) -> BaseTool[BaseModel] | None:
        """Get tool by name."""
        return self._tools.get(name)

    def __getitem__(self, name: str) -> BaseTool[BaseModel]:
        return self._tools[name]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[BaseTool[BaseModel]]:
        return iter(self._tools.values())

    def list_tools(self) -> list[ToolMetadata]:
        """List metadata for all registered tools, in registration order."""
        return [t.metadata for t in self._tools.values()]

    # ─────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────

    async def execute(self, name: str, params: Mapping[str, object] | BaseModel | None = None) -> str:
        """Validate params and run a tool, always answering with text.

        Unknown names, rejected params and exceptions escaping the tool are
        rendered as ToolError text; nothing propagates to the caller.

        Example:
            >>> result = await registry.execute("send_telegram_photo", {"photo": "https://x.test/a.png"})
        """
        if (tool := self._tools.get(name)) is None:
            log.warning("unknown tool", tool=name)
            return ToolError.create(name or "unknown", f"Tool '{name}' not found in registry", ErrorCode.NOT_FOUND, recoverable=False).render()

        try:
            validated = params if isinstance(params, BaseModel) else tool.params_schema.model_validate(dict(params or {}))
        except ValidationError as e:
            log.info("invalid params", tool=name, errors=e.error_count())
            return ToolError.create(name, format_validation_error(e), ErrorCode.INVALID_PARAMS, recoverable=False).render()

        try:
            return await tool.arun(validated)
        except Exception as e:
            log.exception("tool raised", tool=name)
            return ToolError.from_exception(name, e, "Execution failed").render()
