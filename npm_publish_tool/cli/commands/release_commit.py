from __future__ import annotations

from pathlib import Path

import typer

from npm_publish_tool.cli.commands._helpers import (
    PATH_OPTION_HELP,
    exit_on_error,
    exit_with_code,
    resolve_project_path,
)
from npm_publish_tool.cli.context import build_context
from npm_publish_tool.cli.selector import SelectorOption, is_interactive_terminal, select_one
from npm_publish_tool.core.errors import ErrorCode
from npm_publish_tool.core.result import Err
from npm_publish_tool.core.semver import BumpKind
from npm_publish_tool.output.console import Style
from npm_publish_tool.services.release_commit import ReleaseCommitService, VersionChoice


def choose_bump_kind(choices: list[VersionChoice]) -> BumpKind | None:
    """Ask for a bump kind; None when the user cancels."""
    options = [SelectorOption(value=c.kind, label=c.label, detail=c.detail) for c in choices]
    try:
        picked = select_one(title="Select version increment type:", options=options)
    except KeyboardInterrupt:
        return None
    if picked.action != "select":
        return None
    return picked.value


def release_commit(
    path: Path | None = typer.Option(None, "--path", "-p", help=PATH_OPTION_HELP),
) -> None:
    """Bump the package version, commit it as a release and push.

    Runs the same flow as the helper script that `init` installs into the
    project, without needing Node.js dependencies.
    """
    ctx = build_context()
    root = resolve_project_path(path)

    if not is_interactive_terminal():
        ctx.console.error("release-commit needs an interactive terminal")
        ctx.console.print("hint: run it from a terminal session", Style.DIM)
        exit_with_code(ErrorCode.FAILURE)

    result = ReleaseCommitService(root=root, console=ctx.console, choose=choose_bump_kind).run()

    if isinstance(result, Err) and result.error.kind == "cancelled":
        ctx.console.warning(result.error.message)
        exit_with_code(ErrorCode.CANCELLED)

    exit_on_error(result, ctx, error_code=ErrorCode.FAILURE)
