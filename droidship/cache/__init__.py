"""Tool cache package."""

from .tool_cache import ToolCache, create_tool_cache


__all__ = ["ToolCache", "create_tool_cache"]
