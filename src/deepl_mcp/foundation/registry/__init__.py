"""Tool registry and dispatcher."""

from .registry import ToolRegistry

__all__ = ["ToolRegistry"]
