"""Interactive release commit: bump the version, commit, push.

The user picks a bump kind from three options that preview the resulting
version. The choice is the only point where the flow waits; ``choose``
returns the picked kind or ``None`` when the user cancels.

After the choice the flow is linear: save package.json, ``git add --all``,
``git commit -m "release v<version>"``, ``git push``. A failing step stops
the flow; earlier steps are not undone.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from npm_publish_tool.core.config import MANIFEST_NAME
from npm_publish_tool.core.result import Err, Ok, Result
from npm_publish_tool.core.semver import BumpKind, InvalidVersionFormat, increment_version
from npm_publish_tool.git.repository import GitError, Repository
from npm_publish_tool.output.console import ConsoleProtocol, Style
from npm_publish_tool.services.manifest import load_manifest, save_manifest

__all__ = [
    "COMMIT_MESSAGE",
    "Chooser",
    "ReleaseCommit",
    "ReleaseCommitError",
    "ReleaseCommitService",
    "VersionChoice",
    "version_choices",
]

COMMIT_MESSAGE = "release v{version}"


@dataclass(frozen=True, slots=True)
class VersionChoice:
    """One bump option as shown to the user."""

    kind: BumpKind
    label: str
    detail: str


type Chooser = Callable[[list[VersionChoice]], BumpKind | None]


@dataclass(frozen=True, slots=True)
class ReleaseCommitError:
    kind: Literal["manifest", "no_version", "invalid_version", "cancelled", "git_failed"]
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseCommit:
    previous: str
    version: str
    kind: BumpKind
    message: str


_CHOICE_TEXT: tuple[tuple[BumpKind, str, str], ...] = (
    ("major", "Major (breaking changes)", "Incompatible API changes"),
    ("minor", "Minor (new features)", "Backwards-compatible functionality"),
    ("patch", "Patch (bug fixes)", "Backwards-compatible bug fixes"),
)


def version_choices(current: str) -> list[VersionChoice]:
    """Build the major/minor/patch options, each previewing its new version.

    Raises:
        InvalidVersionFormat: ``current`` is not MAJOR.MINOR.PATCH.
    """
    return [
        VersionChoice(
            kind=kind,
            label=label,
            detail=f"{summary} ({current} → {increment_version(current, kind)})",
        )
        for kind, label, summary in _CHOICE_TEXT
    ]


class ReleaseCommitService:
    def __init__(
        self,
        *,
        root: Path,
        console: ConsoleProtocol,
        choose: Chooser,
        repository: Repository | None = None,
    ) -> None:
        self._root = root
        self._console = console
        self._choose = choose
        self._repo = repository or Repository(root)

    def run(self) -> Result[ReleaseCommit, ReleaseCommitError]:
        loaded = load_manifest(self._root / MANIFEST_NAME)
        if isinstance(loaded, Err):
            return Err(
                ReleaseCommitError(
                    kind="manifest", message=loaded.error.message, hint=loaded.error.hint
                )
            )
        manifest = loaded.value

        current = manifest.version
        if current is None:
            return Err(
                ReleaseCommitError(kind="no_version", message=f"No version found in {MANIFEST_NAME}")
            )

        try:
            options = version_choices(current)
        except InvalidVersionFormat as e:
            return Err(
                ReleaseCommitError(
                    kind="invalid_version",
                    message=f"{MANIFEST_NAME} version {current!r}: {e}",
                )
            )

        self._show_current(current)

        kind = self._choose(options)
        if kind is None:
            return Err(ReleaseCommitError(kind="cancelled", message="Release cancelled"))

        new_version = increment_version(current, kind)
        self._console.info(
            f"Updating version from {current} to {new_version} ({kind} increment)"
        )

        saved = save_manifest(manifest.with_version(new_version))
        if isinstance(saved, Err):
            return Err(ReleaseCommitError(kind="manifest", message=saved.error.message))
        self._console.file_operation("Updated", f"{MANIFEST_NAME} with version {new_version}")

        message = COMMIT_MESSAGE.format(version=new_version)
        pushed = (
            self._repo.add_all()
            .flat_map(lambda _: self._repo.commit(message))
            .flat_map(lambda _: self._announce_commit(message))
            .flat_map(lambda _: self._repo.push())
        )
        if isinstance(pushed, Err):
            return Err(ReleaseCommitError(kind="git_failed", message=pushed.error.message))

        self._console.success("Changes pushed to remote repository")
        return Ok(ReleaseCommit(previous=current, version=new_version, kind=kind, message=message))

    def _show_current(self, current: str) -> None:
        self._console.print(f"Current version: {current}", Style.BOLD)
        pad = " " * len("Current version: ")
        self._console.print(f"{pad}│ │ │", Style.DIM)
        self._console.print(f"{pad}│ │ └─ Patch", Style.DIM)
        self._console.print(f"{pad}│ └─── Minor", Style.DIM)
        self._console.print(f"{pad}└───── Major", Style.DIM)

    def _announce_commit(self, message: str) -> Result[None, GitError]:
        self._console.success(f"Release commit created: {message}")
        return Ok(None)
