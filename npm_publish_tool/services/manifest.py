"""package.json handling.

The manifest goes through load -> validate -> transform -> save. Loading
parses and checks the JSON shape; transforms return a new record; saving
serializes with two-space indentation and a trailing newline and replaces the
file atomically. Key order and every untouched field survive the round trip.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from npm_publish_tool.core.result import Err, Ok, Result
from npm_publish_tool.core.structured import StrDict, as_str_dict, get_table
from npm_publish_tool.platform.files import atomic_write_text

__all__ = [
    "ManifestError",
    "PackageManifest",
    "dump_manifest",
    "load_manifest",
    "register_script",
    "save_manifest",
]


@dataclass(frozen=True, slots=True)
class ManifestError:
    kind: Literal["missing", "unreadable", "invalid_json", "invalid_shape", "write_failed"]
    message: str
    path: Path
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class PackageManifest:
    """An in-memory package.json.

    ``data`` is never mutated in place; the ``with_*`` methods copy it.
    """

    path: Path
    data: StrDict

    @property
    def version(self) -> str | None:
        """The version string exactly as written; None when absent or empty."""
        value = self.data.get("version")
        if not isinstance(value, str) or not value:
            return None
        return value

    @property
    def scripts(self) -> StrDict:
        return dict(get_table(self.data, "scripts") or {})

    def with_version(self, version: str) -> PackageManifest:
        data = dict(self.data)
        data["version"] = version
        return PackageManifest(path=self.path, data=data)

    def with_script(self, name: str, command: str) -> PackageManifest:
        scripts = self.scripts
        scripts[name] = command
        data = dict(self.data)
        data["scripts"] = scripts
        return PackageManifest(path=self.path, data=data)


def load_manifest(path: Path) -> Result[PackageManifest, ManifestError]:
    if not path.is_file():
        return Err(
            ManifestError(
                kind="missing",
                message=f"{path.name} not found in {path.parent}",
                path=path,
                hint="run this inside a Node.js project directory",
            )
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        return Err(
            ManifestError(kind="unreadable", message=f"invalid UTF-8 in {path}: {e}", path=path)
        )
    except OSError as e:
        return Err(ManifestError(kind="unreadable", message=f"read {path}: {e}", path=path))

    try:
        data_obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ManifestError(kind="invalid_json", message=f"parse {path}: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(
            ManifestError(
                kind="invalid_shape",
                message=f"{path}: expected a JSON object at the top level",
                path=path,
            )
        )

    if "scripts" in data and get_table(data, "scripts") is None:
        return Err(
            ManifestError(
                kind="invalid_shape",
                message=f"{path}: 'scripts' must be an object",
                path=path,
            )
        )

    return Ok(PackageManifest(path=path, data=data))


def dump_manifest(manifest: PackageManifest) -> str:
    return json.dumps(manifest.data, indent=2, ensure_ascii=False) + "\n"


def save_manifest(manifest: PackageManifest) -> Result[None, ManifestError]:
    try:
        atomic_write_text(manifest.path, dump_manifest(manifest))
    except OSError as e:
        return Err(
            ManifestError(
                kind="write_failed",
                message=f"write {manifest.path}: {e}",
                path=manifest.path,
            )
        )
    return Ok(None)


def register_script(path: Path, name: str, command: str) -> Result[PackageManifest, ManifestError]:
    """Add or overwrite ``scripts[name]`` in the package.json at ``path``."""
    match load_manifest(path):
        case Err(e):
            return Err(e)
        case Ok(manifest):
            updated = manifest.with_script(name, command)
            return save_manifest(updated).map(lambda _: updated)
