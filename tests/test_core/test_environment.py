"""Tests for project root resolution."""

from pathlib import Path

import pytest

from droidship.core.errors import ProjectNotFoundError
from droidship.environment import ProjectEnvironment, create_project_environment
from droidship.protocols import ProjectEnvironmentProtocol


class TestProjectEnvironment:
    """Test ProjectEnvironment."""

    def test_create_project_environment(self, flutter_project: Path):
        environment = create_project_environment(flutter_project)
        assert isinstance(environment, ProjectEnvironmentProtocol)

    def test_explicit_root(self, flutter_project: Path):
        environment = ProjectEnvironment(project_root=flutter_project)

        assert environment.get_project_root() == flutter_project.resolve()

    def test_explicit_root_missing(self, tmp_path: Path):
        environment = ProjectEnvironment(project_root=tmp_path / "missing")

        with pytest.raises(ProjectNotFoundError, match="does not exist"):
            environment.get_project_root()

    def test_discovers_from_nested_directory(self, flutter_project: Path):
        nested = flutter_project / "lib" / "src"
        nested.mkdir(parents=True)

        environment = ProjectEnvironment(start_dir=nested)

        assert environment.get_project_root() == flutter_project.resolve()

    def test_discovers_from_cwd(self, flutter_project: Path, monkeypatch):
        monkeypatch.chdir(flutter_project)

        assert ProjectEnvironment().get_project_root() == flutter_project.resolve()

    def test_no_project(self, tmp_path: Path):
        environment = ProjectEnvironment(start_dir=tmp_path)

        with pytest.raises(ProjectNotFoundError, match="pubspec.yaml"):
            environment.get_project_root()

    def test_root_resolved_once(self, flutter_project: Path, tmp_path: Path):
        environment = ProjectEnvironment(start_dir=flutter_project)
        first = environment.get_project_root()

        (flutter_project / "pubspec.yaml").unlink()

        assert environment.get_project_root() == first
