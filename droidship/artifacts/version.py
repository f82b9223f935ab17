"""Release version resolution for Android App Bundles."""

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path

from droidship.protocols import BundletoolProtocol, ToolCacheProtocol


logger = logging.getLogger(__name__)


class VersionResolver:
    """Read ``<versionName>+<versionCode>`` out of an app bundle."""

    def __init__(
        self, cache: ToolCacheProtocol, bundletool: BundletoolProtocol
    ) -> None:
        """Initialize version resolver.

        Args:
            cache: Tool cache refreshed before bundletool is used
            bundletool: Client reading the bundle manifest
        """
        self.cache = cache
        self.bundletool = bundletool

    def extract_release_version(self, app_bundle_path: Path) -> str:
        """Return the release version of the bundle at ``app_bundle_path``.

        The version name and code are queried concurrently. The first query
        to fail aborts resolution; the other query is not waited for.

        Raises:
            CacheError: If the tool cache cannot be refreshed
            ToolError: If either bundletool query fails
        """
        self.cache.update_all()

        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="bundletool")
        try:
            name_future = executor.submit(
                self.bundletool.get_version_name, app_bundle_path
            )
            code_future = executor.submit(
                self.bundletool.get_version_code, app_bundle_path
            )
            done, _ = wait([name_future, code_future], return_when=FIRST_EXCEPTION)
            _raise_first_failure(done)

            version = f"{name_future.result()}+{code_future.result()}"
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        logger.debug("Release version of %s is %s", app_bundle_path, version)
        return version


def _raise_first_failure(done: set[Future[str]]) -> None:
    for future in done:
        exc = future.exception()
        if exc is not None:
            raise exc


def create_version_resolver(
    cache: ToolCacheProtocol, bundletool: BundletoolProtocol
) -> VersionResolver:
    """Create version resolver instance."""
    return VersionResolver(cache, bundletool)
