"""Integration between Result values and the ToolError text envelope."""

from __future__ import annotations

from typing import TypeAlias

from .errors import ErrorCode, ToolError
from .result import Result
from .types import ErrorTrace, JsonValue

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

ToolResult: TypeAlias = Result[str, ErrorTrace]
OperationResult: TypeAlias = Result[JsonValue, ErrorTrace]


# ═══════════════════════════════════════════════════════════════════════════════
# ToolError Integration
# ═══════════════════════════════════════════════════════════════════════════════


def to_tool_error(result: ToolResult, tool_name: str) -> ToolError:
    """Turn an Err into a ToolError; the trace message is kept verbatim."""
    err = result.unwrap_err()
    try:
        code = ErrorCode(err.error_code) if err.error_code else ErrorCode.UNKNOWN
    except ValueError:
        code = ErrorCode.UNKNOWN
    return ToolError(tool_name=tool_name, message=err.message, code=code, recoverable=err.recoverable, details=err.details)


def result_to_string(result: ToolResult, tool_name: str) -> str:
    """Ok passes its text through; Err renders as a ToolError."""
    return result.unwrap() if result.is_ok() else to_tool_error(result, tool_name).render()
