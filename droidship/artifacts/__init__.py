"""Artifact resolution and extraction for Flutter Android builds."""

from .extractor import ArchiveExtractor, create_archive_extractor
from .identifier import normalize, same_artifact
from .locator import ArtifactLocator, create_artifact_locator
from .paths import (
    aar_artifact_directory,
    aar_artifact_path,
    aar_library_path,
    bundle_query,
    package_query,
    query_for_variant,
)
from .service import AndroidArtifacts, create_android_artifacts
from .version import VersionResolver, create_version_resolver


__all__ = [
    "AndroidArtifacts",
    "ArchiveExtractor",
    "ArtifactLocator",
    "VersionResolver",
    "aar_artifact_directory",
    "aar_artifact_path",
    "aar_library_path",
    "bundle_query",
    "create_android_artifacts",
    "create_archive_extractor",
    "create_artifact_locator",
    "create_version_resolver",
    "normalize",
    "package_query",
    "query_for_variant",
    "same_artifact",
]
