from __future__ import annotations

from pathlib import Path

import typer

from npm_publish_tool.cli.commands._helpers import (
    PATH_OPTION_HELP,
    exit_on_error,
    resolve_project_path,
)
from npm_publish_tool.cli.context import build_context
from npm_publish_tool.core.config import DEFAULT_PLAN
from npm_publish_tool.core.errors import ErrorCode
from npm_publish_tool.output.console import ConsoleProtocol, Style
from npm_publish_tool.services.scaffold import ScaffoldReport, ScaffoldService


def init(
    path: Path | None = typer.Option(None, "--path", "-p", help=PATH_OPTION_HELP),
) -> None:
    """Initialize release-it configuration in your project."""
    _scaffold(title="NPM Publish Tool Initialization", verb="Initializing", path=path)


def setup(
    path: Path | None = typer.Option(None, "--path", "-p", help=PATH_OPTION_HELP),
) -> None:
    """Setup release-it configuration in your project."""
    _scaffold(title="NPM Publish Tool Setup", verb="Setting up", path=path)


def _scaffold(*, title: str, verb: str, path: Path | None) -> None:
    ctx = build_context()
    root = resolve_project_path(path)

    ctx.console.header(title)
    ctx.console.info(f"{verb} release-it configuration in: {root}")

    result = ScaffoldService(root=root, console=ctx.console, plan=DEFAULT_PLAN).run()
    exit_on_error(result, ctx, error_code=ErrorCode.FAILURE)

    ctx.console.separator()
    print_completion(ctx.console, result.unwrap())


def print_completion(console: ConsoleProtocol, report: ScaffoldReport) -> None:
    pm = str(report.package_manager.name) if report.package_manager else "npm"
    console.newline()
    console.success("Setup completed successfully!")
    console.print("Your project is now configured with release-it and GitHub Actions.", Style.SUCCESS)
    console.newline()
    console.print("Next steps:", Style.WARNING)
    console.print("1. Configure your GitHub repository secrets (NPM_TOKEN, ACCESS_TOKEN)")
    console.print("2. Make sure the Git working tree is clean")
    console.print(f"3. Run: {pm} run {DEFAULT_PLAN.script_name}")
    console.print(
        "4. The package is published to the npm registry and a GitHub release"
        " page is created automatically."
    )
