"""Tests for npm_publish_tool.platform.files module."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from npm_publish_tool.platform.files import atomic_write_text, copy_file, make_executable


def test_atomic_write_text_creates_parent(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "package.json"
    atomic_write_text(target, '{"name": "demo"}\n')

    assert target.read_text(encoding="utf-8") == '{"name": "demo"}\n'


def test_atomic_write_text_replaces_and_leaves_no_temp(tmp_path: Path) -> None:
    target = tmp_path / "package.json"
    target.write_text("old", encoding="utf-8")

    atomic_write_text(target, "new")

    assert target.read_text(encoding="utf-8") == "new"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["package.json"]


def test_atomic_write_text_keeps_newlines(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    atomic_write_text(target, "a\nb\n")

    assert target.read_bytes() == b"a\nb\n"


def test_copy_file_creates_directories(tmp_path: Path) -> None:
    src = tmp_path / "release.yml"
    src.write_text("name: Release\n", encoding="utf-8")
    dst = tmp_path / "project" / ".github" / "workflows" / "release.yml"

    copy_file(src, dst)

    assert dst.read_text(encoding="utf-8") == "name: Release\n"


def test_copy_file_overwrites(tmp_path: Path) -> None:
    src = tmp_path / "src.json"
    src.write_text("{}", encoding="utf-8")
    dst = tmp_path / "dst.json"
    dst.write_text('{"old": true}', encoding="utf-8")

    copy_file(src, dst)

    assert dst.read_text(encoding="utf-8") == "{}"


def test_copy_file_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        copy_file(tmp_path / "missing", tmp_path / "dst")


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_make_executable(tmp_path: Path) -> None:
    script = tmp_path / "helper.mjs"
    script.write_text("", encoding="utf-8")
    script.chmod(0o644)

    make_executable(script)

    mode = stat.S_IMODE(script.stat().st_mode)
    assert mode == 0o755


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
@pytest.mark.parametrize("mode", [0o644, 0o664, 0o600])
def test_atomic_write_text_keeps_existing_mode(tmp_path: Path, mode: int) -> None:
    target = tmp_path / "package.json"
    target.write_text("{}", encoding="utf-8")
    target.chmod(mode)

    atomic_write_text(target, '{"version": "1.0.1"}\n')

    assert stat.S_IMODE(target.stat().st_mode) == mode
