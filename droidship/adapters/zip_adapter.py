"""Default decompression operation for zip-compatible archives."""

import logging
import zipfile
from pathlib import Path

from droidship.core.errors import ExtractionError
from droidship.utils.error_utils import create_file_error


logger = logging.getLogger(__name__)


def unzip(zip_path: Path, target_dir: Path) -> None:
    """Extract every member of ``zip_path`` into ``target_dir``.

    The target directory is created when missing. Existing files inside it
    are overwritten, so extracting the same archive twice yields the same
    tree.

    Args:
        zip_path: Archive to extract; must have a ``.zip`` extension
        target_dir: Directory receiving the archive contents

    Raises:
        ExtractionError: If the archive is unreadable or a member would be
            written outside ``target_dir``
        FileSystemError: If the archive or target cannot be accessed
    """
    if zip_path.suffix.lower() != ".zip":
        raise ExtractionError(
            f"Unsupported archive type: {zip_path.name}",
            {"archive": str(zip_path)},
        )

    logger.debug("Unzipping %s into %s", zip_path, target_dir)
    root = target_dir.resolve()

    try:
        with zipfile.ZipFile(zip_path) as archive:
            for member in archive.namelist():
                destination = (root / member).resolve()
                if destination != root and root not in destination.parents:
                    raise ExtractionError(
                        f"Archive member escapes target directory: {member}",
                        {"archive": str(zip_path), "member": member},
                    )
            target_dir.mkdir(parents=True, exist_ok=True)
            archive.extractall(target_dir)
            logger.debug(
                "Extracted %d entries from %s", len(archive.namelist()), zip_path
            )
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"Invalid zip archive {zip_path}: {e}", {"archive": str(zip_path)}
        ) from e
    except OSError as e:
        raise create_file_error(
            zip_path, "unzip", e, {"target_dir": str(target_dir)}
        ) from e
