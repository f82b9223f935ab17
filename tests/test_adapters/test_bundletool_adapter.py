"""Tests for BundletoolAdapter."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from droidship.adapters.bundletool_adapter import (
    VERSION_CODE_XPATH,
    VERSION_NAME_XPATH,
    BundletoolAdapter,
    create_bundletool_adapter,
)
from droidship.core.errors import ToolError
from droidship.protocols import BundletoolProtocol


JAR = Path("/cache/bundletool/bundletool-1.15.6.jar")
BUNDLE = Path("/project/build/app/outputs/bundle/release/app-release.aab")


class TestBundletoolAdapter:
    """Test bundletool invocation."""

    def setup_method(self):
        self.adapter = BundletoolAdapter(JAR, java_path="/usr/bin/java")

    def test_create_bundletool_adapter(self):
        adapter = create_bundletool_adapter(JAR)
        assert isinstance(adapter, BundletoolProtocol)
        assert adapter.java_path == "java"

    @patch("subprocess.run")
    def test_get_version_name(self, mock_run):
        mock_run.return_value = Mock(stdout="1.2.3\n", stderr="", returncode=0)

        assert self.adapter.get_version_name(BUNDLE) == "1.2.3"

        mock_run.assert_called_once_with(
            [
                "/usr/bin/java",
                "-jar",
                str(JAR),
                "dump",
                "manifest",
                f"--bundle={BUNDLE}",
                "--xpath",
                VERSION_NAME_XPATH,
            ],
            check=True,
            capture_output=True,
            text=True,
        )

    @patch("subprocess.run")
    def test_get_version_code(self, mock_run):
        mock_run.return_value = Mock(stdout="17\n", stderr="", returncode=0)

        assert self.adapter.get_version_code(BUNDLE) == "17"
        assert mock_run.call_args.args[0][-1] == VERSION_CODE_XPATH

    @patch("subprocess.run")
    def test_non_zero_exit(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["java"], output="", stderr="Bundle not found\n"
        )

        with pytest.raises(ToolError) as exc_info:
            self.adapter.get_version_name(BUNDLE)

        error = exc_info.value
        assert error.tool == "bundletool"
        assert error.stderr == "Bundle not found\n"
        assert "exited with code 1" in str(error)
        assert "Bundle not found" in str(error)

    @patch("subprocess.run")
    def test_java_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("java")

        with pytest.raises(ToolError, match="Java executable not found"):
            self.adapter.get_version_code(BUNDLE)
