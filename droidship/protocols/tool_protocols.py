"""Protocols for the external collaborators used during artifact resolution."""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable


# Decompresses the zip at the first path into the directory at the second.
UnzipFn: TypeAlias = Callable[[Path, Path], None]


@runtime_checkable
class ProjectEnvironmentProtocol(Protocol):
    """Provides the root of the Flutter project being released."""

    def get_project_root(self) -> Path:
        """Return the project root directory.

        Raises:
            ProjectNotFoundError: If no project root can be resolved
        """
        ...


@runtime_checkable
class ToolCacheProtocol(Protocol):
    """Keeps downloaded build tools up to date."""

    def update_all(self) -> None:
        """Bring every cached tool up to date. Idempotent.

        Raises:
            CacheError: If any tool cannot be refreshed
        """
        ...


@runtime_checkable
class BundletoolProtocol(Protocol):
    """Reads metadata out of Android App Bundles."""

    def get_version_name(self, app_bundle_path: Path) -> str:
        """Return the ``versionName`` declared in the bundle manifest.

        Raises:
            ToolError: If bundletool fails
        """
        ...

    def get_version_code(self, app_bundle_path: Path) -> str:
        """Return the ``versionCode`` declared in the bundle manifest.

        Raises:
            ToolError: If bundletool fails
        """
        ...
