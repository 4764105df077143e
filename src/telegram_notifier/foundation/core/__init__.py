"""Core tool abstractions."""

from .base import BaseTool, TParams, ToolMetadata

__all__ = ["BaseTool", "TParams", "ToolMetadata"]
