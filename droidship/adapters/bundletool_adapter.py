"""Bundletool adapter for reading App Bundle manifests."""

import logging
import subprocess
from pathlib import Path

from droidship.protocols import BundletoolProtocol
from droidship.utils.error_utils import create_tool_error


logger = logging.getLogger(__name__)

VERSION_NAME_XPATH = "/manifest/@android:versionName"
VERSION_CODE_XPATH = "/manifest/@android:versionCode"


class BundletoolAdapter:
    """Run bundletool through the java executable."""

    def __init__(self, bundletool_jar: Path, java_path: str = "java") -> None:
        """Initialize bundletool adapter.

        Args:
            bundletool_jar: Path to the bundletool jar, usually inside the tool cache
            java_path: Java executable used to run the jar
        """
        self.bundletool_jar = bundletool_jar
        self.java_path = java_path

    def get_version_name(self, app_bundle_path: Path) -> str:
        """Return the versionName of the bundle at ``app_bundle_path``."""
        return self._dump_manifest(app_bundle_path, VERSION_NAME_XPATH)

    def get_version_code(self, app_bundle_path: Path) -> str:
        """Return the versionCode of the bundle at ``app_bundle_path``."""
        return self._dump_manifest(app_bundle_path, VERSION_CODE_XPATH)

    def _dump_manifest(self, app_bundle_path: Path, xpath: str) -> str:
        cmd = [
            self.java_path,
            "-jar",
            str(self.bundletool_jar),
            "dump",
            "manifest",
            f"--bundle={app_bundle_path}",
            "--xpath",
            xpath,
        ]
        cmd_str = " ".join(cmd)
        logger.debug("Running bundletool: %s", cmd_str)

        try:
            result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            error = create_tool_error(
                "bundletool", cmd, f"Java executable not found: {self.java_path}"
            )
            logger.error("Java executable not found: %s", self.java_path)
            raise error from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr or ""
            error = create_tool_error(
                "bundletool", cmd, f"exited with code {e.returncode}", stderr
            )
            logger.error("bundletool failed: %s - error: %s", cmd_str, stderr.strip())
            raise error from e

        value = result.stdout.strip()
        logger.debug("bundletool %s -> %s", xpath, value)
        return value


def create_bundletool_adapter(
    bundletool_jar: Path, java_path: str = "java"
) -> BundletoolProtocol:
    """Create a bundletool adapter for the given jar."""
    return BundletoolAdapter(bundletool_jar, java_path)
