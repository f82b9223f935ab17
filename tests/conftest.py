"""Core test fixtures for the droidship project."""

import logging
import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from droidship.config.models import UserConfigData
from droidship.protocols import (
    BundletoolProtocol,
    FileAdapterProtocol,
    ProjectEnvironmentProtocol,
    ToolCacheProtocol,
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    return Mock(spec=FileAdapterProtocol)


@pytest.fixture
def mock_cache() -> Mock:
    """Create a mock tool cache for testing."""
    return Mock(spec=ToolCacheProtocol)


@pytest.fixture
def mock_bundletool() -> Mock:
    """Create a mock bundletool client for testing."""
    return Mock(spec=BundletoolProtocol)


@pytest.fixture
def flutter_project(tmp_path: Path) -> Path:
    """Create a minimal Flutter project directory."""
    project = tmp_path / "my_app"
    project.mkdir()
    (project / "pubspec.yaml").write_text("name: my_app\n")
    return project


@pytest.fixture
def mock_environment(flutter_project: Path) -> Mock:
    """Project environment returning the temporary Flutter project."""
    environment = Mock(spec=ProjectEnvironmentProtocol)
    environment.get_project_root.return_value = flutter_project
    return environment


@pytest.fixture
def isolated_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Isolate configuration from the user's environment.

    Clears DROIDSHIP_ variables, points XDG directories into the temporary
    directory and runs the test from an empty working directory.
    """
    for key in list(os.environ):
        if key.startswith("DROIDSHIP_"):
            monkeypatch.delenv(key)

    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg_config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg_cache"))
    monkeypatch.chdir(workdir)
    yield workdir


@pytest.fixture
def user_config_data(isolated_env: Path, tmp_path: Path) -> UserConfigData:
    """Configuration with the tool cache inside the temporary directory."""
    return UserConfigData(cache_path=tmp_path / "cache")


@pytest.fixture(autouse=True)
def reset_root_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
