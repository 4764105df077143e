"""Tool registry."""

from .registry import ToolRegistry

__all__ = ["ToolRegistry"]
