"""Locate a single build artifact inside a Gradle output directory."""

import logging
from pathlib import Path

from droidship.adapters import create_file_adapter
from droidship.artifacts.identifier import normalize
from droidship.core.errors import ArtifactNotFoundError, MultipleArtifactsFoundError
from droidship.models.artifacts import ArtifactQuery
from droidship.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


class ArtifactLocator:
    """Find the file in a directory whose identifier matches an expected name.

    Only immediate children that are regular files are considered. The
    directory is listed once per lookup.
    """

    def __init__(self, file_adapter: FileAdapterProtocol | None = None) -> None:
        """Initialize artifact locator.

        Args:
            file_adapter: File operations adapter
        """
        self.file_adapter = file_adapter or create_file_adapter()

    def locate(self, directory: Path, artifact_name: str) -> Path:
        """Return the single artifact in ``directory`` matching ``artifact_name``.

        Args:
            directory: Build output directory to search
            artifact_name: File name Gradle is expected to produce

        Returns:
            Path: The matching file

        Raises:
            ArtifactNotFoundError: If the directory is missing, is not a
                directory or holds no match
            MultipleArtifactsFoundError: If more than one file matches
        """
        artifact_id = normalize(artifact_name)
        logger.debug(
            "Looking for %s (id=%s) in %s", artifact_name, artifact_id, directory
        )

        if not self.file_adapter.is_dir(directory):
            raise ArtifactNotFoundError(artifact_name=artifact_name, build_dir=directory)

        candidates = [
            path
            for path in self.file_adapter.list_directory(directory)
            if normalize(path.name) == artifact_id and self.file_adapter.is_file(path)
        ]

        if not candidates:
            raise ArtifactNotFoundError(artifact_name=artifact_name, build_dir=directory)

        if len(candidates) > 1:
            raise MultipleArtifactsFoundError(
                build_dir=directory, found_artifacts=candidates
            )

        logger.debug("Found artifact %s", candidates[0])
        return candidates[0]

    def locate_query(self, query: ArtifactQuery) -> Path:
        """Resolve an ``ArtifactQuery`` produced by the path helpers."""
        return self.locate(query.directory, query.expected_file_name)


def create_artifact_locator(
    file_adapter: FileAdapterProtocol | None = None,
) -> ArtifactLocator:
    """Create artifact locator instance."""
    return ArtifactLocator(file_adapter)
