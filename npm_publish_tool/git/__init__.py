"""Git operations used by the release helper."""

from .repository import GitError, Repository

__all__ = ["GitError", "Repository"]
