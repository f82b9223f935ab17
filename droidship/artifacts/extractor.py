"""Extraction of Android library archives built by ``flutter build aar``."""

import logging
import tempfile
from pathlib import Path

from droidship.adapters import create_file_adapter, unzip
from droidship.artifacts.paths import AAR_ARTIFACT_ID, aar_paths_for_variant
from droidship.models.artifacts import LibraryArchiveVariant
from droidship.protocols import (
    FileAdapterProtocol,
    ProjectEnvironmentProtocol,
    UnzipFn,
)


logger = logging.getLogger(__name__)


class ArchiveExtractor:
    """Unpack a release aar next to the original archive.

    An aar is a zip file with a different extension. The unzip operation
    dispatches on the extension, so the archive is first copied into a
    temporary staging directory as ``.zip`` and unpacked from there into
    ``<artifact dir>/flutter_release-<build number>``. The staging directory
    is removed before returning.
    """

    def __init__(
        self,
        environment: ProjectEnvironmentProtocol,
        unzip_fn: UnzipFn = unzip,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        """Initialize archive extractor.

        Args:
            environment: Provides the project root the aar lives under
            unzip_fn: Decompression operation ``(zip_path, target_dir)``
            file_adapter: File operations adapter
        """
        self.environment = environment
        self.unzip_fn = unzip_fn
        self.file_adapter = file_adapter or create_file_adapter()

    def extract_aar(self, package_name: str, build_number: str) -> Path:
        """Extract the aar for ``package_name`` and ``build_number``.

        Args:
            package_name: Dot-separated Android package of the module
            build_number: Build number the aar was produced with

        Returns:
            Path: Directory holding the extracted archive contents

        Raises:
            ValidationError: If the package name or build number is blank
            FileSystemError: If the aar cannot be copied
            ExtractionError: If the default unzip operation fails; custom
                unzip functions propagate their own errors
        """
        variant = LibraryArchiveVariant(
            package_name=package_name, build_number=build_number
        )
        aar_directory, aar_path = aar_paths_for_variant(
            self.environment.get_project_root(), variant
        )
        extracted_dir = aar_directory / f"{AAR_ARTIFACT_ID}-{variant.build_number}"

        with tempfile.TemporaryDirectory(prefix="droidship-aar-") as staging:
            zip_path = Path(staging) / f"{AAR_ARTIFACT_ID}-{variant.build_number}.zip"
            logger.debug("Extracting %s to %s", aar_path, zip_path)

            self.file_adapter.copy_file(aar_path, zip_path)
            self.unzip_fn(zip_path, extracted_dir)

        logger.debug("Extracted %s into %s", aar_path, extracted_dir)
        return extracted_dir


def create_archive_extractor(
    environment: ProjectEnvironmentProtocol,
    unzip_fn: UnzipFn = unzip,
    file_adapter: FileAdapterProtocol | None = None,
) -> ArchiveExtractor:
    """Create archive extractor instance."""
    return ArchiveExtractor(environment, unzip_fn, file_adapter)
