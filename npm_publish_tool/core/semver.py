"""Semantic version parsing and bumping.

Only the strict ``MAJOR.MINOR.PATCH`` numeric form is understood: no ``v``
prefix, no pre-release or build metadata.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Literal, get_args

__all__ = [
    "BUMP_KINDS",
    "BumpKind",
    "InvalidBumpKind",
    "InvalidVersionFormat",
    "SemVer",
    "increment_version",
]

BumpKind = Literal["major", "minor", "patch"]

BUMP_KINDS: Final[tuple[BumpKind, ...]] = get_args(BumpKind)

_COMPONENT_RE = re.compile(r"[0-9]+")


class InvalidVersionFormat(ValueError):
    """Raised for version strings that are not MAJOR.MINOR.PATCH."""

    def __init__(self) -> None:
        super().__init__("Invalid version format. Expected MAJOR.MINOR.PATCH")


class InvalidBumpKind(ValueError):
    """Raised for bump kinds other than major, minor or patch."""

    def __init__(self) -> None:
        super().__init__('Invalid increment type. Use "major", "minor", or "patch"')


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> SemVer:
        parts = text.split(".")
        if len(parts) != 3 or not all(_COMPONENT_RE.fullmatch(p) for p in parts):
            raise InvalidVersionFormat()
        major, minor, patch = (int(p) for p in parts)
        return cls(major, minor, patch)

    def bump(self, kind: BumpKind | str | None) -> SemVer:
        match kind:
            case "major":
                return SemVer(self.major + 1, 0, 0)
            case "minor":
                return SemVer(self.major, self.minor + 1, 0)
            case "patch":
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise InvalidBumpKind()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def increment_version(version: str, kind: BumpKind | str | None) -> str:
    """Return ``version`` bumped by ``kind``.

    The format is checked before the kind, so ``("1.0", None)`` reports the
    format error.

    Raises:
        InvalidVersionFormat: ``version`` is not three dot-separated integers.
        InvalidBumpKind: ``kind`` is not "major", "minor" or "patch".
    """
    return str(SemVer.parse(version).bump(kind))
