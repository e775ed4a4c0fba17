"""Scaffold release automation into a Node.js project.

The run is a fixed list of steps executed in order. The project directory is
validated before any step runs; after that the first failing step ends the
run and its error is returned. Nothing is rolled back.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from npm_publish_tool.core.config import DEFAULT_PLAN, MANIFEST_NAME, ScaffoldPlan, TemplateCopy
from npm_publish_tool.core.result import Err, Ok, Result
from npm_publish_tool.output.console import ConsoleProtocol
from npm_publish_tool.output.progress import ProgressBar
from npm_publish_tool.services.manifest import register_script
from npm_publish_tool.services.package_manager import (
    PackageManagerInfo,
    get_package_manager_info,
    install_package,
)
from npm_publish_tool.services.templates import TEMPLATES_DIR, copy_template

__all__ = ["ScaffoldError", "ScaffoldReport", "ScaffoldService", "ScaffoldStep"]


@dataclass(frozen=True, slots=True)
class ScaffoldError:
    kind: Literal["invalid_project", "install_failed", "copy_failed", "manifest_failed"]
    message: str
    hint: str | None = None


type StepResult = Result[None, ScaffoldError]


@dataclass(frozen=True, slots=True)
class ScaffoldStep:
    description: str
    action: Callable[[], StepResult]


@dataclass(slots=True)
class ScaffoldReport:
    """What a completed run did."""

    root: Path
    package_manager: PackageManagerInfo | None = None
    installed: list[str] = field(default_factory=list)
    written: list[str] = field(default_factory=list)


class ScaffoldService:
    def __init__(
        self,
        *,
        root: Path,
        console: ConsoleProtocol,
        plan: ScaffoldPlan = DEFAULT_PLAN,
        templates_dir: Path = TEMPLATES_DIR,
    ) -> None:
        self._root = root
        self._console = console
        self._plan = plan
        self._templates_dir = templates_dir
        self._report = ScaffoldReport(root=root)

    def validate(self) -> Result[None, ScaffoldError]:
        if not self._root.is_dir():
            return Err(
                ScaffoldError(
                    kind="invalid_project",
                    message=f"Project directory does not exist: {self._root}",
                )
            )
        if not (self._root / MANIFEST_NAME).is_file():
            return Err(
                ScaffoldError(
                    kind="invalid_project",
                    message=f"No {MANIFEST_NAME} found in the project directory",
                    hint="make sure you are in a valid Node.js project directory",
                )
            )
        return Ok(None)

    def steps(self) -> list[ScaffoldStep]:
        steps = [ScaffoldStep("Detecting package manager...", self._detect)]
        steps.extend(
            ScaffoldStep(f"Installing {dep}...", self._installer(dep))
            for dep in self._plan.dev_dependencies
        )
        steps.extend(
            ScaffoldStep(f"Copying {copy.target}...", self._copier(copy))
            for copy in self._plan.templates
        )
        steps.append(
            ScaffoldStep(
                f"Creating release helper {self._plan.helper.target}...",
                self._copier(self._plan.helper),
            )
        )
        steps.append(
            ScaffoldStep(
                f"Adding {self._plan.script_name} script to {MANIFEST_NAME}...",
                self._register_script,
            )
        )
        return steps

    def run(self) -> Result[ScaffoldReport, ScaffoldError]:
        validated = self.validate()
        if isinstance(validated, Err):
            return validated

        self._console.separator()
        steps = self.steps()
        progress = ProgressBar(len(steps), self._console)

        for number, step in enumerate(steps, start=1):
            self._console.step(number, step.description)
            result = step.action()
            if isinstance(result, Err):
                return result
            progress.increment()

        return Ok(self._report)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _detect(self) -> StepResult:
        info = get_package_manager_info(self._root)
        self._report.package_manager = info
        self._console.package_manager(str(info.name), info.version)
        return Ok(None)

    def _installer(self, package: str) -> Callable[[], StepResult]:
        def install() -> StepResult:
            result = install_package(package, self._root, console=self._console, dev=True)
            if isinstance(result, Err):
                return Err(
                    ScaffoldError(
                        kind="install_failed",
                        message=f"Failed to install {package}: {result.error.message}",
                    )
                )
            self._report.installed.append(package)
            self._console.success(f"{package} installed successfully")
            return Ok(None)

        return install

    def _copier(self, copy: TemplateCopy) -> Callable[[], StepResult]:
        def copy_step() -> StepResult:
            result = copy_template(copy, self._root, templates_dir=self._templates_dir)
            if isinstance(result, Err):
                return Err(
                    ScaffoldError(
                        kind="copy_failed",
                        message=f"Failed to copy {copy.target}: {result.error.message}",
                        hint=result.error.hint,
                    )
                )
            self._report.written.append(copy.target)
            self._console.file_operation("Created", copy.target)
            return Ok(None)

        return copy_step

    def _register_script(self) -> StepResult:
        name = self._plan.script_name
        result = register_script(self._root / MANIFEST_NAME, name, self._plan.script_command)
        if isinstance(result, Err):
            return Err(
                ScaffoldError(
                    kind="manifest_failed",
                    message=f"Failed to add script to {MANIFEST_NAME}: {result.error.message}",
                    hint=result.error.hint,
                )
            )
        self._report.written.append(MANIFEST_NAME)
        self._console.file_operation("Updated", f"{MANIFEST_NAME} (added {name} script)")
        return Ok(None)
