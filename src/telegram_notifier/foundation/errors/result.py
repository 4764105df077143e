"""Success/failure values for upstream calls and tools.

The client and the tools hand back a Result instead of raising. It becomes
text exactly once, when the registry answers a tool call.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class Result(Generic[T, E]):
    """Either an Ok value or an Err value.

    >>> Ok({"message_id": 7}).match(ok=lambda body: "sent", err=str)
    'sent'
    """

    __slots__ = ("_value", "_is_ok")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def unwrap(self) -> T:
        """Ok value, or RuntimeError for an Err."""
        if not self._is_ok:
            raise RuntimeError(f"unwrap() on Err: {self._value}")
        return self._value  # type: ignore[return-value]

    def unwrap_err(self) -> E:
        """Err value, or RuntimeError for an Ok."""
        if self._is_ok:
            raise RuntimeError(f"unwrap_err() on Ok: {self._value}")
        return self._value  # type: ignore[return-value]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Dispatch on the variant; both branches are required."""
        if self._is_ok:
            return ok(self._value)  # type: ignore[arg-type]
        return err(self._value)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    return Result(value, True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    return Result(error, False)
