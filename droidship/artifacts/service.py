"""Android artifact service combining lookup, extraction and version reading."""

import logging
from pathlib import Path

from droidship.adapters import (
    create_bundletool_adapter,
    create_file_adapter,
    unzip,
)
from droidship.artifacts import paths
from droidship.artifacts.extractor import ArchiveExtractor
from droidship.artifacts.locator import ArtifactLocator
from droidship.artifacts.version import VersionResolver
from droidship.cache import create_tool_cache
from droidship.config.models import UserConfigData
from droidship.environment import create_project_environment
from droidship.models.artifacts import (
    BundleVariant,
    LibraryArchiveVariant,
    PackageVariant,
)
from droidship.protocols import (
    BundletoolProtocol,
    FileAdapterProtocol,
    ProjectEnvironmentProtocol,
    ToolCacheProtocol,
    UnzipFn,
)


logger = logging.getLogger(__name__)


class AndroidArtifacts:
    """Find and post-process the artifacts of a Flutter Android release build."""

    def __init__(
        self,
        environment: ProjectEnvironmentProtocol,
        cache: ToolCacheProtocol,
        bundletool: BundletoolProtocol,
        unzip_fn: UnzipFn = unzip,
        file_adapter: FileAdapterProtocol | None = None,
    ) -> None:
        self.environment = environment
        self.file_adapter = file_adapter or create_file_adapter()
        self.locator = ArtifactLocator(self.file_adapter)
        self.extractor = ArchiveExtractor(environment, unzip_fn, self.file_adapter)
        self.version_resolver = VersionResolver(cache, bundletool)

    def find_aab(self, project: Path, flavor: str | None = None) -> Path:
        """Find the release app bundle built in ``project``."""
        variant = BundleVariant(flavor=flavor)
        return self.locator.locate_query(paths.query_for_variant(project, variant))

    def find_apk(self, project: Path, flavor: str | None = None) -> Path:
        """Find the release apk built in ``project``."""
        variant = PackageVariant(flavor=flavor)
        return self.locator.locate_query(paths.query_for_variant(project, variant))

    def aar_library_path(self) -> Path:
        return paths.aar_library_path(self.environment.get_project_root())

    def aar_artifact_directory(self, package_name: str, build_number: str) -> Path:
        variant = LibraryArchiveVariant(
            package_name=package_name, build_number=build_number
        )
        directory, _ = paths.aar_paths_for_variant(
            self.environment.get_project_root(), variant
        )
        return directory

    def aar_artifact_path(self, package_name: str, build_number: str) -> Path:
        variant = LibraryArchiveVariant(
            package_name=package_name, build_number=build_number
        )
        _, aar_path = paths.aar_paths_for_variant(
            self.environment.get_project_root(), variant
        )
        return aar_path

    def extract_aar(self, package_name: str, build_number: str) -> Path:
        """Unzip the release aar and return the extracted directory."""
        return self.extractor.extract_aar(package_name, build_number)

    def extract_release_version_from_app_bundle(self, app_bundle_path: Path) -> str:
        """Return ``<versionName>+<versionCode>`` of an app bundle."""
        return self.version_resolver.extract_release_version(app_bundle_path)


def create_android_artifacts(
    config: UserConfigData,
    project_root: Path | None = None,
    environment: ProjectEnvironmentProtocol | None = None,
    cache: ToolCacheProtocol | None = None,
    bundletool: BundletoolProtocol | None = None,
    unzip_fn: UnzipFn = unzip,
    file_adapter: FileAdapterProtocol | None = None,
) -> AndroidArtifacts:
    """Create the artifact service with default collaborators.

    Args:
        config: User configuration (cache location, java, bundletool version)
        project_root: Explicit project root; discovered from cwd when omitted
        environment: Overrides the project environment
        cache: Overrides the tool cache
        bundletool: Overrides the bundletool client
        unzip_fn: Overrides the decompression operation
        file_adapter: Overrides the file adapter

    Returns:
        AndroidArtifacts: Configured service
    """
    return AndroidArtifacts(
        environment=environment or create_project_environment(project_root),
        cache=cache or create_tool_cache(config),
        bundletool=bundletool
        or create_bundletool_adapter(config.bundletool_jar, config.java_path),
        unzip_fn=unzip_fn,
        file_adapter=file_adapter,
    )
