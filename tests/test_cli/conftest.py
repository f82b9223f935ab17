"""Test fixtures for CLI tests."""

from pathlib import Path

import pytest


@pytest.fixture
def built_bundle(flutter_project: Path) -> Path:
    """Create a flavored release bundle inside the Flutter project."""
    aab = flutter_project / "build/app/outputs/bundle/proRelease/app-pro-release.aab"
    aab.parent.mkdir(parents=True)
    aab.write_bytes(b"aab")
    return aab
