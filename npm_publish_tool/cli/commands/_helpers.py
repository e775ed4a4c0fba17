"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from npm_publish_tool.core.errors import ErrorCode
from npm_publish_tool.core.result import Err, Result
from npm_publish_tool.output.console import Style

if TYPE_CHECKING:
    from npm_publish_tool.cli.context import CLIContext


T = TypeVar("T")
E = TypeVar("E")

PATH_OPTION_HELP = "Project path (defaults to the current directory)"


def resolve_project_path(path: Path | None) -> Path:
    """Absolute project root for a ``--path`` value (cwd when omitted)."""
    return (path if path is not None else Path.cwd()).expanduser().resolve()


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.FAILURE,
) -> None:
    """Exit with error if result is Err, otherwise return.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))


def exit_with_code(code: ErrorCode) -> NoReturn:
    raise typer.Exit(code=int(code))
