"""Core tool abstractions: BaseTool and ToolMetadata.

Tools are defined by subclassing BaseTool with a typed pydantic parameter
schema. Each tool produces a ToolResult internally; the text answer handed to
the host is rendered once, in ``arun``.
"""

from __future__ import annotations

import traceback
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..errors import Err, ErrorCode, ErrorTrace, Ok, ToolResult, classify_exception, result_to_string, trace


class ToolMetadata(BaseModel):
    """Metadata describing a tool to the host.

    Attributes:
        name: Unique identifier (snake_case, e.g., "send_telegram_photo")
        title: Short human-readable label shown by hosts that support titles
        description: What the tool does (shown to the model for selection)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    title: str | None = Field(default=None)
    description: str = Field(..., min_length=10)


TParams = TypeVar("TParams", bound=BaseModel)


class BaseTool(ABC, Generic[TParams]):
    """Abstract base class for all tools.

    Subclasses must:
    - Define `metadata` class variable with ToolMetadata
    - Define `params_schema` class variable with the Pydantic model type
    - Implement `_async_run_result(params)` returning a ToolResult

    Example:
        >>> class PingParams(BaseModel):
        ...     text: str = Field(..., description="Text to echo")
        ...
        >>> class PingTool(BaseTool[PingParams]):
        ...     metadata = ToolMetadata(name="ping", description="Echo the given text back")
        ...     params_schema = PingParams
        ...
        ...     async def _async_run_result(self, params: PingParams) -> ToolResult:
        ...         return self._ok(params.text)
    """

    metadata: ClassVar[ToolMetadata]
    params_schema: ClassVar[type[BaseModel]]

    # ─────────────────────────────────────────────────────────────────
    # Result Helpers
    # ─────────────────────────────────────────────────────────────────

    def _ok(self, value: str) -> ToolResult:
        return Ok(value)

    def _err(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        recoverable: bool = True,
        status: int | None = None,
    ) -> ToolResult:
        """Create Err result from error parameters."""
        err = trace(message, code=code.value, status=status, recoverable=recoverable)
        return Err(err.with_operation(f"tool:{self.metadata.name}"))

    def _err_from_exc(self, exc: Exception, context: str = "") -> ToolResult:
        """Create Err result from exception (internal helper)."""
        msg = f"{context}: {exc}" if context else str(exc)
        err = trace(msg, code=classify_exception(exc).value, recoverable=False, details=traceback.format_exc())
        return Err(err.with_operation(f"tool:{self.metadata.name}"))

    def _lift(self, error: ErrorTrace) -> ToolResult:
        """Re-tag a failure from a lower layer with this tool's context."""
        return Err(error.with_operation(f"tool:{self.metadata.name}"))

    # ─────────────────────────────────────────────────────────────────
    # Core Execution
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    async def _async_run_result(self, params: TParams) -> ToolResult:
        """Execute the tool. Expected failures come back as Err, never raised."""
        ...

    async def arun_result(self, params: TParams) -> ToolResult:
        """Execute, converting any escaped exception to an Err result."""
        try:
            return await self._async_run_result(params)
        except Exception as e:
            return self._err_from_exc(e, "execution")

    async def arun(self, params: TParams) -> str:
        """Execute and render the text answer for the host."""
        return result_to_string(await self.arun_result(params), self.metadata.name)

    # ─────────────────────────────────────────────────────────────────
    # Invocation (kwargs interface)
    # ─────────────────────────────────────────────────────────────────

    async def acall(self, **kwargs: object) -> str:
        """Async invoke with keyword arguments."""
        params = self.params_schema(**kwargs)  # type: ignore[call-arg]
        return await self.arun(params)  # type: ignore[arg-type]
