"""Typed description of what a scaffold run does.

The plan is built in, not loaded from disk: the only user input is the
project path given on the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

__all__ = [
    "DEFAULT_PLAN",
    "HELPER_DEPENDENCIES",
    "HELPER_SCRIPT",
    "MANIFEST_NAME",
    "ScaffoldPlan",
    "TemplateCopy",
]

MANIFEST_NAME = "package.json"


@dataclass(frozen=True, slots=True)
class TemplateCopy:
    """A bundled template and where it lands in the target project.

    Attributes:
        template: File name inside the bundled ``templates`` directory.
        target: Path relative to the project root (POSIX separators).
        executable: Mark the copied file ``0o755``.
    """

    template: str
    target: str
    executable: bool = False

    @property
    def target_parts(self) -> tuple[str, ...]:
        return PurePosixPath(self.target).parts


# Imported by the installed helper script.
HELPER_DEPENDENCIES = ("ora", "@inquirer/prompts")

HELPER_SCRIPT = TemplateCopy(
    template="npm-publish-tool.mjs",
    target="scripts/npm-publish-tool.mjs",
    executable=True,
)


def _default_templates() -> tuple[TemplateCopy, ...]:
    return (
        TemplateCopy(template="release-it.json", target=".release-it.json"),
        TemplateCopy(template="release.yml", target=".github/workflows/release.yml"),
    )


@dataclass(frozen=True, slots=True)
class ScaffoldPlan:
    """Everything a scaffold run installs, copies and registers."""

    dev_dependencies: tuple[str, ...] = ("release-it", *HELPER_DEPENDENCIES)
    templates: tuple[TemplateCopy, ...] = field(default_factory=_default_templates)
    helper: TemplateCopy = HELPER_SCRIPT
    script_name: str = "push-release-commit"
    script_command: str = "node ./scripts/npm-publish-tool.mjs"


DEFAULT_PLAN = ScaffoldPlan()
