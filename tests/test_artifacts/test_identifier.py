"""Test artifact identifier normalization."""

import pytest

from droidship.artifacts.identifier import normalize, same_artifact


class TestNormalize:
    """Test normalize()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("app-release.aab", "appreleaseaab"),
            ("app-pro-release.aab", "appproreleaseaab"),
            ("APP_FLAVOR1_FLAVOR2_RELEASE.AAB", "appflavor1flavor2releaseaab"),
            ("app-freeDev-release.apk", "appfreedevreleaseapk"),
            ("", ""),
            ("---...___", ""),
            ("café-1.apk", "caf1apk"),
        ],
    )
    def test_normalize(self, name, expected):
        """Non-alphanumeric characters are dropped and the rest lowercased."""
        assert normalize(name) == expected

    def test_multi_dimension_flavor_renderings_match(self):
        """Different separator and casing conventions share one identifier."""
        assert normalize("app-flavor1-flavor2-release.aab") == normalize(
            "APP_FLAVOR1_FLAVOR2_RELEASE.AAB"
        )
        assert normalize("app-flavor1Flavor2-release.aab") == normalize(
            "app-flavor1-flavor2-release.aab"
        )

    def test_normalize_is_idempotent(self):
        key = normalize("App-Pro-Release.aab")
        assert normalize(key) == key


class TestSameArtifact:
    """Test same_artifact()."""

    def test_same(self):
        assert same_artifact("app-pro-release.aab", "app_Pro_release.aab")

    def test_different_flavor(self):
        assert not same_artifact("app-pro-release.aab", "app-free-release.aab")

    def test_different_extension(self):
        assert not same_artifact("app-release.aab", "app-release.apk")
