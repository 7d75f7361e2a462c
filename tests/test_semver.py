"""
Tests for tagver.versioning.strict module.

Tests strict SemVer handling including:
- Canonicalization (baseline, marker, build metadata, shorthand)
- SemVer precedence via the semver package
- Lexicographic fallback for invalid input
"""

from __future__ import annotations

import pytest

from tagver.logging import get_logger
from tagver.versioning import (
    BASELINE_SEMVER,
    canonical_semver,
    compare,
    compare_semver,
    is_valid_semver,
)


class TestCanonicalSemver:
    """Tests for canonical_semver()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", "v0.0.0"),
            ("1.2.3", "v1.2.3"),
            ("v1.2.3", "v1.2.3"),
            ("v1.2.3+build.5", "v1.2.3"),
            ("1.2.3-rc.1+build.5", "v1.2.3-rc.1"),
            ("v1", "v1.0.0"),
            ("v1.2", "v1.2.0"),
        ],
    )
    def test_valid_inputs(self, raw, expected):
        """Test canonical forms of valid SemVer."""
        assert canonical_semver(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("banana", "vbanana"),
            ("V1.0.0", "vV1.0.0"),  # only a lowercase marker is recognized
            ("01.0.0", "v01.0.0"),
            ("v1.2-rc", "v1.2-rc"),  # shorthand cannot carry a prerelease
            ("1.0.0.1", "v1.0.0.1"),
        ],
    )
    def test_invalid_inputs_returned_with_marker(self, raw, expected):
        """Test that invalid input is returned unchanged apart from the marker."""
        assert canonical_semver(raw) == expected

    def test_baseline_constant(self):
        """Test the baseline used for empty input."""
        assert BASELINE_SEMVER == "v0.0.0"
        assert canonical_semver("") == BASELINE_SEMVER


class TestIsValidSemver:
    """Tests for is_valid_semver()."""

    def test_valid(self):
        """Test strings that are valid once the marker is added."""
        assert is_valid_semver("1.0.0")
        assert is_valid_semver("v1.0.0-alpha.1+build")
        assert is_valid_semver("1.0")
        assert is_valid_semver("")

    def test_invalid(self):
        """Test strings that are not SemVer."""
        assert not is_valid_semver("1.0-rc")
        assert not is_valid_semver("1.0.0\n")
        assert not is_valid_semver("١.0.0")
        assert not is_valid_semver("hive.1.0.0")


class TestCompareSemver:
    """Tests for compare_semver()."""

    def test_any_suffix_is_prerelease(self):
        """Test that strict SemVer treats every suffix as a prerelease."""
        assert compare_semver("1.0.0-foo", "1.0.0") < 0
        assert compare_semver("1.0.0-hotfix", "1.0.0") < 0
        # The flexible comparator disagrees on purpose
        assert compare("1.0.0-hotfix", "1.0.0") > 0

    def test_build_metadata_ignored(self):
        """Test that build metadata does not affect precedence."""
        assert compare_semver("1.0.0+build.1", "1.0.0+build.2") == 0
        assert compare_semver("v1.0.0+build.1", "1.0.0") == 0

    def test_precedence(self):
        """Test SemVer 2.0.0 precedence rules."""
        assert compare_semver("2.0.0", "1.9.9") == 1
        assert compare_semver("1.0.0-alpha", "1.0.0-alpha.1") == -1
        assert compare_semver("1.0.0-alpha.beta", "1.0.0-beta") == -1
        assert compare_semver("1.0.0-rc.10", "1.0.0-rc.2") == 1
        assert compare_semver("1.0.0-1", "1.0.0-alpha") == -1

    def test_shorthand_and_marker(self):
        """Test that shorthand and marker forms compare equal to full forms."""
        assert compare_semver("v1.2", "1.2.0") == 0
        assert compare_semver("1", "v1.0.0") == 0

    def test_empty_is_baseline(self):
        """Test that empty input compares as v0.0.0."""
        assert compare_semver("", "") == 0
        assert compare_semver("", "0.0.0") == 0
        assert compare_semver("", "0.0.1") == -1

    def test_invalid_falls_back_to_string_order(self):
        """Test plain string comparison of the original inputs."""
        assert compare_semver("banana", "1.0.0") == 1
        assert compare_semver("1.0.0", "1.0.0.1") == -1
        assert compare_semver("", "banana") == -1
        assert compare_semver("banana", "banana") == 0

    def test_symmetry(self):
        """Test that results flip when arguments are swapped."""
        versions = ["", "1.0.0", "v1.0.0", "1.0.0-rc.1", "1.0", "banana", "1.0.0.1"]
        for a in versions:
            for b in versions:
                assert compare_semver(a, b) == -compare_semver(b, a), (a, b)

    def test_debug_logging(self, capsys):
        """Test that the deciding path is reported to a debug logger."""
        compare_semver("banana", "1.0.0", logger=get_logger(debug=True))
        out = capsys.readouterr().out
        assert "[SEMVER]" in out
        assert "lexicographic" in out
