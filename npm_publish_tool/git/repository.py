"""Git repository abstraction.

Only the three commands the release helper needs are wrapped. They stream
their output to the terminal (a push may ask for credentials) and have no
timeout.

Usage:
    repo = Repository(Path("/path/to/project"))
    match repo.add_all().flat_map(lambda _: repo.commit("release v1.2.4")):
        case Ok(_):
            print("committed")
        case Err(e):
            print(f"error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from npm_publish_tool.core.result import Err, Ok, Result
from npm_publish_tool.platform.process import ProcessError, run_streaming

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "push")
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A git working tree rooted at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def add_all(self) -> Result[None, GitError]:
        """Stage every change in the working tree (`git add --all`)."""
        return self._run(["add", "--all"], command="add --all")

    def commit(self, message: str) -> Result[None, GitError]:
        """Create a commit with ``message`` (`git commit -m`)."""
        return self._run(["commit", "-m", message], command="commit")

    def push(self) -> Result[None, GitError]:
        """Push the current branch to its configured remote."""
        return self._run(["push"], command="push")

    def _run(self, args: list[str], *, command: str) -> Result[None, GitError]:
        result = run_streaming(["git", *args], cwd=self.path)
        match result:
            case Err(e):
                return Err(_git_error(command, e))
            case Ok(_):
                return Ok(None)


def _git_error(command: str, error: ProcessError) -> GitError:
    if error.returncode == -1:
        message = f"git {command} could not start: {error.stderr.strip()}"
    else:
        message = f"git {command} failed (exit {error.returncode})"
    return GitError(command=command, message=message, returncode=error.returncode)
