"""Droidship - Flutter Android release artifact tool."""

from importlib.metadata import distribution

from .artifacts import AndroidArtifacts, create_android_artifacts, normalize
from .core.errors import (
    ArtifactNotFoundError,
    DroidshipError,
    MultipleArtifactsFoundError,
)


__version__ = distribution(__package__ or "droidship").version

__all__ = [
    "AndroidArtifacts",
    "ArtifactNotFoundError",
    "DroidshipError",
    "MultipleArtifactsFoundError",
    "create_android_artifacts",
    "normalize",
    "__version__",
]
