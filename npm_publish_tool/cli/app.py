from __future__ import annotations

import typer

from npm_publish_tool import __version__
from npm_publish_tool.cli.commands._helpers import exit_with_code
from npm_publish_tool.cli.commands.release_commit import release_commit
from npm_publish_tool.cli.commands.scaffold import init, setup
from npm_publish_tool.core.errors import ErrorCode


app = typer.Typer(
    name="npm-publish-tool",
    help="Set up release-it and a GitHub Actions release workflow in a Node.js project.",
    add_completion=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(init)
app.command()(setup)
app.command("release-commit")(release_commit)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-V", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        exit_with_code(ErrorCode.OK)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        exit_with_code(ErrorCode.OK)


def main() -> None:
    app()
