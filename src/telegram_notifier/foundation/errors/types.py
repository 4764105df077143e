"""Type aliases and error context tracking for Result-based error handling.

Uses Pydantic models for validation/serialization. Traces are built with
``model_construct`` on the hot path; validation is only needed for data that
crosses a process boundary.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

# Any for the recursive slots to avoid Pydantic resolution issues
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue: TypeAlias = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict: TypeAlias = dict[str, Any]

_EMPTY_META: JsonDict = {}


# ═══════════════════════════════════════════════════════════════════════════════
# Error Context & Provenance
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorContext(BaseModel):
    """Context for an error at a call site: operation name plus metadata."""

    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, extra="forbid",
        revalidate_instances="never",
        json_schema_extra={"title": "Error Context", "examples": [{"operation": "telegram:sendPhoto", "metadata": {"status": 403}}]},
    )

    operation: Annotated[str, Field(min_length=1)]
    metadata: JsonDict = Field(default_factory=dict, repr=False)

    def __str__(self) -> str:
        meta = f" ({', '.join(f'{k}={v}' for k, v in self.metadata.items())})" if self.metadata else ""
        return f"{self.operation}{meta}"

    def __hash__(self) -> int:
        return hash((self.operation, tuple(sorted(self.metadata.items()))))


_EMPTY_CONTEXTS: tuple[ErrorContext, ...] = ()


class ErrorTrace(BaseModel):
    """Failure value carried through Err results.

    Holds the caller-facing message, the chain of operations it passed
    through, the machine-readable code and, for upstream failures, the HTTP
    status the Bot API answered with.
    """

    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, validate_default=True, extra="forbid",
        revalidate_instances="never",
        json_schema_extra={"title": "Error Trace", "description": "Failure with provenance and upstream status"},
    )

    message: Annotated[str, Field(min_length=1)]
    contexts: tuple[ErrorContext, ...] = _EMPTY_CONTEXTS
    error_code: str | None = Field(default=None, repr=True)
    status: int | None = Field(default=None, description="Upstream HTTP status, when one was received")
    recoverable: bool = True
    details: str | None = Field(default=None, repr=False)

    @field_serializer("contexts")
    def _serialize_contexts(self, v: tuple[ErrorContext, ...]) -> list[JsonDict]:
        return [ctx.model_dump() for ctx in v]

    @computed_field
    @property
    def root_operation(self) -> str | None:
        """First operation in the trace (origin)."""
        return self.contexts[0].operation if self.contexts else None

    def __hash__(self) -> int:
        return hash((self.message, self.error_code, self.status, self.recoverable))

    def with_operation(self, operation: str, **metadata: JsonValue) -> ErrorTrace:
        """Return a new trace with one more context appended."""
        ctx = ErrorContext.model_construct(operation=operation, metadata=metadata or _EMPTY_META)
        return self.model_copy(update={"contexts": (*self.contexts, ctx)})

    def format(self) -> str:
        """Format trace as a human-readable string for logs."""
        parts = [self.message]
        if self.error_code:
            parts.append(f" [{self.error_code}]")
        if self.status is not None:
            parts.append(f" (status {self.status})")
        if self.contexts:
            parts.append(" <- " + " <- ".join(map(str, self.contexts)))
        return "".join(parts)

    __str__ = format


def trace(
    message: str,
    *,
    code: str | None = None,
    status: int | None = None,
    recoverable: bool = True,
    details: str | None = None,
) -> ErrorTrace:
    """Create ErrorTrace concisely (bypasses validation)."""
    return ErrorTrace.model_construct(
        message=message,
        contexts=_EMPTY_CONTEXTS,
        error_code=code,
        status=status,
        recoverable=recoverable,
        details=details,
    )
