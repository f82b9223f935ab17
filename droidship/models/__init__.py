"""Data models for Droidship."""

from .artifacts import (
    ArtifactQuery,
    BuildVariant,
    BundleVariant,
    LibraryArchiveVariant,
    PackageVariant,
)
from .base import DroidshipBaseModel


__all__ = [
    "ArtifactQuery",
    "BuildVariant",
    "BundleVariant",
    "DroidshipBaseModel",
    "LibraryArchiveVariant",
    "PackageVariant",
]
