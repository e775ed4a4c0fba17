"""Bundled template lookup and copy."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from npm_publish_tool.core.config import TemplateCopy
from npm_publish_tool.core.result import Err, Ok, Result
from npm_publish_tool.platform.files import copy_file, make_executable

__all__ = ["TEMPLATES_DIR", "TemplateError", "copy_template", "template_path"]

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@dataclass(frozen=True, slots=True)
class TemplateError:
    kind: Literal["template_missing", "copy_failed"]
    message: str
    hint: str | None = None


def template_path(name: str, *, templates_dir: Path = TEMPLATES_DIR) -> Path:
    return templates_dir / name


def copy_template(
    copy: TemplateCopy,
    root: Path,
    *,
    templates_dir: Path = TEMPLATES_DIR,
) -> Result[Path, TemplateError]:
    """Copy a bundled template into ``root``, overwriting any existing file.

    Returns the path written.
    """
    src = template_path(copy.template, templates_dir=templates_dir)
    if not src.is_file():
        return Err(
            TemplateError(
                kind="template_missing",
                message=f"bundled template not found: {src}",
                hint="reinstall npm-publish-tool",
            )
        )

    dst = root.joinpath(*copy.target_parts)
    try:
        copy_file(src, dst)
        if copy.executable:
            make_executable(dst)
    except OSError as e:
        return Err(TemplateError(kind="copy_failed", message=f"copy {copy.template} to {dst}: {e}"))

    return Ok(dst)
