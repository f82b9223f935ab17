"""Output locations used by the Flutter Android toolchain."""

from pathlib import Path

from droidship.models.artifacts import (
    ArtifactQuery,
    BundleVariant,
    LibraryArchiveVariant,
    PackageVariant,
)


AAR_ARTIFACT_ID = "flutter_release"


def bundle_query(project: Path, flavor: str | None = None) -> ArtifactQuery:
    """Where ``flutter build appbundle`` writes its release bundle."""
    directory = project.joinpath(
        "build",
        "app",
        "outputs",
        "bundle",
        f"{flavor}Release" if flavor is not None else "release",
    )
    name = f"app-{flavor}-release.aab" if flavor is not None else "app-release.aab"
    return ArtifactQuery(directory=directory, expected_file_name=name)


def package_query(project: Path, flavor: str | None = None) -> ArtifactQuery:
    """Where ``flutter build apk`` writes its release package.

    All flavors share one directory; only the file name changes.
    """
    directory = project.joinpath("build", "app", "outputs", "flutter-apk")
    name = f"app-{flavor}-release.apk" if flavor is not None else "app-release.apk"
    return ArtifactQuery(directory=directory, expected_file_name=name)


def query_for_variant(
    project: Path, variant: BundleVariant | PackageVariant
) -> ArtifactQuery:
    """Build the lookup for a bundle or package variant."""
    if isinstance(variant, BundleVariant):
        return bundle_query(project, variant.flavor)
    return package_query(project, variant.flavor)


def aar_library_path(project: Path) -> Path:
    """Root of the local maven repository written by ``flutter build aar``."""
    return project.joinpath("build", "host", "outputs", "repo")


def aar_artifact_directory(
    project: Path, package_name: str, build_number: str
) -> Path:
    """Maven directory of the release aar for ``package_name``/``build_number``."""
    return aar_library_path(project).joinpath(
        *package_name.split("."), AAR_ARTIFACT_ID, build_number
    )


def aar_artifact_path(project: Path, package_name: str, build_number: str) -> Path:
    """Path of the release aar file."""
    return aar_artifact_directory(project, package_name, build_number) / (
        f"{AAR_ARTIFACT_ID}-{build_number}.aar"
    )


def aar_paths_for_variant(
    project: Path, variant: LibraryArchiveVariant
) -> tuple[Path, Path]:
    """Return ``(artifact_directory, artifact_path)`` for a library archive."""
    return (
        aar_artifact_directory(project, variant.package_name, variant.build_number),
        aar_artifact_path(project, variant.package_name, variant.build_number),
    )
