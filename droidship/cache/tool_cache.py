"""Cache of downloaded build tools."""

import logging
import os
import tempfile
from pathlib import Path

import requests

from droidship.config.models import UserConfigData
from droidship.core.errors import CacheError
from droidship.protocols import ToolCacheProtocol


logger = logging.getLogger(__name__)

DOWNLOAD_CHUNK_SIZE = 64 * 1024


class ToolCache:
    """Keep the tools needed to inspect build artifacts on disk.

    Currently the only cached tool is the bundletool jar. ``update_all`` is
    idempotent: a jar that is already present is left untouched.
    """

    def __init__(
        self,
        config: UserConfigData,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the tool cache.

        Args:
            config: User configuration with cache location and tool versions
            session: HTTP session used for downloads
        """
        self.config = config
        self.session = session or requests.Session()

    @property
    def bundletool_jar(self) -> Path:
        return self.config.bundletool_jar

    def update_all(self) -> None:
        """Download every missing tool.

        Raises:
            CacheError: If a tool cannot be downloaded or stored
        """
        self._ensure_bundletool()

    def _ensure_bundletool(self) -> None:
        jar = self.bundletool_jar
        if jar.is_file():
            logger.debug("bundletool %s already cached", self.config.bundletool_version)
            return

        url = self.config.bundletool_url.format(version=self.config.bundletool_version)
        logger.info("Downloading bundletool %s", self.config.bundletool_version)
        self._download(url, jar)

    def _download(self, url: str, destination: Path) -> None:
        """Stream ``url`` into ``destination`` through a temporary file."""
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(
                f"Cannot create cache directory {destination.parent}: {e}",
                {"path": str(destination.parent)},
            ) from e

        tmp_name: str | None = None
        try:
            with self.session.get(
                url, stream=True, timeout=self.config.download_timeout
            ) as response:
                response.raise_for_status()
                with tempfile.NamedTemporaryFile(
                    dir=destination.parent, suffix=".part", delete=False
                ) as tmp:
                    tmp_name = tmp.name
                    for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        tmp.write(chunk)
            os.replace(tmp_name, destination)
            tmp_name = None
            logger.debug("Stored %s at %s", url, destination)
        except requests.exceptions.RequestException as e:
            raise CacheError(
                f"Failed to download {url}: {e}", {"url": url}
            ) from e
        except OSError as e:
            raise CacheError(
                f"Failed to store {destination}: {e}",
                {"url": url, "path": str(destination)},
            ) from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)


def create_tool_cache(
    config: UserConfigData, session: requests.Session | None = None
) -> ToolCacheProtocol:
    """Create a tool cache for the given configuration."""
    return ToolCache(config, session)
