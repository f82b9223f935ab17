"""Project environment: locates the Flutter project being released."""

import logging
from pathlib import Path

from droidship.core.errors import ProjectNotFoundError
from droidship.protocols import ProjectEnvironmentProtocol


logger = logging.getLogger(__name__)

PROJECT_MARKER = "pubspec.yaml"


class ProjectEnvironment:
    """Resolve the project root once and hand it out read-only."""

    def __init__(
        self, project_root: Path | None = None, start_dir: Path | None = None
    ) -> None:
        """Initialize the project environment.

        Args:
            project_root: Explicit project root; skips discovery when given
            start_dir: Directory discovery walks upward from (default: cwd)
        """
        self._explicit_root = project_root
        self._start_dir = start_dir
        self._project_root: Path | None = None

    def get_project_root(self) -> Path:
        """Return the project root, discovering it on first use."""
        if self._project_root is None:
            self._project_root = self._resolve()
        return self._project_root

    def _resolve(self) -> Path:
        if self._explicit_root is not None:
            root = self._explicit_root.expanduser().resolve()
            if not root.is_dir():
                raise ProjectNotFoundError(
                    f"Project directory does not exist: {root}",
                    {"project_root": str(root)},
                )
            return root

        start = (self._start_dir or Path.cwd()).resolve()
        for candidate in (start, *start.parents):
            if (candidate / PROJECT_MARKER).is_file():
                logger.debug("Found project root at %s", candidate)
                return candidate

        raise ProjectNotFoundError(
            f"No {PROJECT_MARKER} found in {start} or any parent directory",
            {"start_dir": str(start)},
        )


def create_project_environment(
    project_root: Path | None = None, start_dir: Path | None = None
) -> ProjectEnvironmentProtocol:
    """Create a project environment."""
    return ProjectEnvironment(project_root=project_root, start_dir=start_dir)
