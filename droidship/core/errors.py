"""Error types raised by Droidship.

Every error carries a human-readable message and an optional ``context``
dictionary with the values that produced it, so the CLI layer can render
precise diagnostics without re-deriving them.
"""

from pathlib import Path
from typing import Any


class DroidshipError(Exception):
    """Base class for all Droidship errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(DroidshipError):
    """Invalid or unreadable configuration."""


class ProjectNotFoundError(DroidshipError):
    """No Flutter project root could be resolved."""


class FileSystemError(DroidshipError):
    """A file system operation failed."""

    def __init__(
        self,
        path: Path | str,
        operation: str,
        original: Exception,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.path = Path(path)
        self.operation = operation
        self.original = original
        details = {"path": str(path), "operation": operation, **(context or {})}
        super().__init__(
            f"File operation '{operation}' failed on '{path}': {original}", details
        )


class ToolError(DroidshipError):
    """An external tool (java, bundletool) exited unsuccessfully."""

    def __init__(
        self,
        tool: str,
        command: list[str],
        message: str,
        stderr: str = "",
    ) -> None:
        self.tool = tool
        self.command = command
        self.stderr = stderr
        super().__init__(
            f"{tool} failed: {message}",
            {"tool": tool, "command": " ".join(command), "stderr": stderr},
        )


class CacheError(DroidshipError):
    """The tool cache could not be brought up to date."""


class ExtractionError(DroidshipError):
    """An archive could not be decompressed."""


class ArtifactError(DroidshipError):
    """Base class for artifact resolution failures."""


class ArtifactNotFoundError(ArtifactError):
    """No artifact matching the expected name exists in the build directory."""

    def __init__(self, artifact_name: str, build_dir: Path | str) -> None:
        self.artifact_name = artifact_name
        self.build_dir = str(build_dir)
        super().__init__(
            f"Artifact {artifact_name} not found in {self.build_dir}",
            {"artifact_name": artifact_name, "build_dir": self.build_dir},
        )


class MultipleArtifactsFoundError(ArtifactError):
    """More than one file in the build directory matches the expected name."""

    def __init__(self, build_dir: Path | str, found_artifacts: list[Path]) -> None:
        self.build_dir = str(build_dir)
        self.found_artifacts = sorted(found_artifacts, key=str)
        paths = [str(path) for path in self.found_artifacts]
        super().__init__(
            f"Multiple artifacts found in {self.build_dir}: {paths}",
            {"build_dir": self.build_dir, "found_artifacts": paths},
        )
