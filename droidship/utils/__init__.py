"""Utility helpers for Droidship."""

from .error_utils import create_file_error, create_tool_error


__all__ = ["create_file_error", "create_tool_error"]
