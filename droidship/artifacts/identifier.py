"""Canonical identifiers for Gradle output file names.

Gradle names release outputs inconsistently depending on how flavors are
configured::

    bundle/release/app-release.aab                          (no flavors)
    bundle/proRelease/app-pro-release.aab                   (one dimension)
    bundle/freeDevRelease/app-free-dev-release.aab          (multi dimension)

The flavor names always appear in the same order, only separators and casing
change. Comparing the lowercased alphanumeric characters of two names is
enough to tell whether they refer to the same artifact.
"""

import re


_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def normalize(name: str) -> str:
    """Return the artifact identifier for a file name.

    Example:
        >>> normalize("app-freeDev-release.aab")
        'appfreedevreleaseaab'
    """
    return _NON_ALNUM.sub("", name).lower()


def same_artifact(a: str, b: str) -> bool:
    """Whether two file names identify the same artifact."""
    return normalize(a) == normalize(b)
