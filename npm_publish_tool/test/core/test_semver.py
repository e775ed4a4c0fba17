"""Tests for npm_publish_tool.core.semver."""

from __future__ import annotations

import pytest

from npm_publish_tool.core.semver import (
    BUMP_KINDS,
    InvalidBumpKind,
    InvalidVersionFormat,
    SemVer,
    increment_version,
)


class TestIncrementVersion:
    def test_patch(self) -> None:
        assert increment_version("1.0.0", "patch") == "1.0.1"

    def test_minor_resets_patch(self) -> None:
        assert increment_version("2.5.3", "minor") == "2.6.0"

    def test_major_resets_minor_and_patch(self) -> None:
        assert increment_version("99.5.3", "major") == "100.0.0"

    @pytest.mark.parametrize(
        ("version", "kind", "expected"),
        [
            ("0.0.0", "patch", "0.0.1"),
            ("0.0.9", "patch", "0.0.10"),
            ("0.9.9", "minor", "0.10.0"),
            ("9.9.9", "major", "10.0.0"),
            ("1.2.3", "major", "2.0.0"),
            ("1.2.3", "minor", "1.3.0"),
            ("1.2.3", "patch", "1.2.4"),
        ],
    )
    def test_rollover(self, version: str, kind: str, expected: str) -> None:
        assert increment_version(version, kind) == expected

    def test_only_lower_components_reset(self) -> None:
        """Higher components are kept, the target grows by one, lower ones reset."""
        base = SemVer(4, 7, 11)
        for kind in BUMP_KINDS:
            bumped = SemVer.parse(increment_version(str(base), kind))
            if kind == "major":
                assert bumped == SemVer(5, 0, 0)
            elif kind == "minor":
                assert bumped == SemVer(4, 8, 0)
            else:
                assert bumped == SemVer(4, 7, 12)

    def test_large_components(self) -> None:
        assert increment_version("1.2.99999999999999999999", "patch") == "1.2.100000000000000000000"

    @pytest.mark.parametrize("version", ["1.0", "1.0.0.0", "", "1", "a.b.c", "1.0.x", "1..0"])
    def test_invalid_format(self, version: str) -> None:
        with pytest.raises(InvalidVersionFormat, match="Invalid version format"):
            increment_version(version, "patch")

    @pytest.mark.parametrize("version", ["v1.0.0", "1.0.0-beta.1", "-1.0.0", " 1.0.0"])
    def test_rejects_non_numeric_forms(self, version: str) -> None:
        with pytest.raises(InvalidVersionFormat):
            increment_version(version, "patch")

    @pytest.mark.parametrize("kind", ["", "Major", "prerelease", "invalid", None])
    def test_invalid_kind(self, kind: str | None) -> None:
        with pytest.raises(InvalidBumpKind, match='Invalid increment type. Use "major"'):
            increment_version("1.0.0", kind)

    def test_format_is_checked_before_kind(self) -> None:
        with pytest.raises(InvalidVersionFormat):
            increment_version("1.0", None)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            increment_version("1.0", "patch")
        with pytest.raises(ValueError):
            increment_version("1.0.0", "huge")


class TestSemVer:
    def test_parse_and_str(self) -> None:
        v = SemVer.parse("10.20.30")
        assert v == SemVer(10, 20, 30)
        assert str(v) == "10.20.30"

    def test_leading_zeros_are_parsed_as_integers(self) -> None:
        assert SemVer.parse("01.002.0003") == SemVer(1, 2, 3)

    def test_ordering(self) -> None:
        assert SemVer(1, 2, 3) < SemVer(1, 3, 0) < SemVer(2, 0, 0)

    def test_frozen(self) -> None:
        v = SemVer(1, 0, 0)
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore[misc]

    def test_bump_kinds(self) -> None:
        assert BUMP_KINDS == ("major", "minor", "patch")
