from .errors import (
    ArtifactError,
    ArtifactNotFoundError,
    CacheError,
    ConfigError,
    DroidshipError,
    ExtractionError,
    FileSystemError,
    MultipleArtifactsFoundError,
    ProjectNotFoundError,
    ToolError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "DroidshipError",
    "ArtifactError",
    "ArtifactNotFoundError",
    "MultipleArtifactsFoundError",
    "CacheError",
    "ConfigError",
    "ExtractionError",
    "FileSystemError",
    "ProjectNotFoundError",
    "ToolError",
]
