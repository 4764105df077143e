"""Unified error handling for telegram-notifier.

- ErrorCode: Standard error codes for tool and upstream failures
- ToolError: Structured error rendered as the tool's text answer
- ConfigurationError: Fatal startup error
- Result/Ok/Err: Explicit success/failure values
- ErrorTrace/ErrorContext: Failure payload with provenance and upstream status
"""

from .errors import ConfigurationError, ErrorCode, ToolError, classify_exception, code_for_status, format_validation_error
from .result import Err, Ok, Result
from .tool import OperationResult, ToolResult, result_to_string, to_tool_error
from .types import ErrorContext, ErrorTrace, JsonDict, JsonValue, trace

__all__ = [
    # Core errors
    "ErrorCode", "ToolError", "ConfigurationError", "classify_exception", "code_for_status",
    "format_validation_error",
    # Result
    "Result", "Ok", "Err",
    # Tool integration
    "ToolResult", "OperationResult", "to_tool_error", "result_to_string",
    # Error context
    "ErrorContext", "ErrorTrace", "JsonDict", "JsonValue", "trace",
]
