"""Helpers for building consistently shaped errors."""

from pathlib import Path
from typing import Any

from droidship.core.errors import FileSystemError, ToolError


def create_file_error(
    path: Path | str,
    operation: str,
    original: Exception,
    context: dict[str, Any] | None = None,
) -> FileSystemError:
    """Wrap a low-level exception raised by a file operation.

    Args:
        path: Path the operation was applied to
        operation: Name of the failing operation (e.g. ``copy_file``)
        original: The exception raised by the operation
        context: Extra values to attach to the error

    Returns:
        FileSystemError ready to be raised ``from original``
    """
    return FileSystemError(path, operation, original, context)


def create_tool_error(
    tool: str,
    command: list[str],
    original: Exception | str,
    stderr: str = "",
) -> ToolError:
    """Wrap a failed external tool invocation."""
    message = str(original)
    if stderr:
        message = f"{message}: {stderr.strip()}"
    return ToolError(tool, command, message, stderr=stderr)
