"""Models describing build variants and artifact lookups."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator

from droidship.models.base import DroidshipBaseModel


class _FlavoredVariant(DroidshipBaseModel):
    """Variant whose output name depends on an optional flavor."""

    flavor: str | None = Field(
        default=None, description="Build flavor name, e.g. 'pro' or 'freeDev'"
    )

    @field_validator("flavor")
    @classmethod
    def validate_flavor(cls, v: str | None) -> str | None:
        """Reject empty flavors and flavors that would escape the build dir."""
        if v is None:
            return None
        if not v.strip():
            raise ValueError("flavor must not be blank")
        if "/" in v or "\\" in v:
            raise ValueError(f"flavor must not contain path separators: {v!r}")
        return v


class BundleVariant(_FlavoredVariant):
    """Android App Bundle (.aab) release output."""

    kind: Literal["bundle"] = "bundle"


class PackageVariant(_FlavoredVariant):
    """Android package (.apk) release output."""

    kind: Literal["package"] = "package"


class LibraryArchiveVariant(DroidshipBaseModel):
    """Android library archive (.aar) produced by an add-to-app module build."""

    kind: Literal["library_archive"] = "library_archive"
    package_name: str = Field(description="Dot-separated package, e.g. com.example.app")
    build_number: str = Field(description="Build number token, e.g. '1.0'")

    @field_validator("package_name", "build_number")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must not be blank")
        return v


BuildVariant = Annotated[
    BundleVariant | PackageVariant | LibraryArchiveVariant,
    Field(discriminator="kind"),
]


class ArtifactQuery(DroidshipBaseModel):
    """Where to look for an artifact and the name it is expected to have."""

    directory: Path
    expected_file_name: str
