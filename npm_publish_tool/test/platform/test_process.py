"""Tests for npm_publish_tool.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from npm_publish_tool.core.result import Err, Ok
from npm_publish_tool.platform.process import ProcessError, run, run_streaming


class TestProcessError:
    """Test ProcessError dataclass."""

    def test_str_short_command(self) -> None:
        error = ProcessError(command=("git", "push"), returncode=1, stdout="", stderr="")
        assert str(error) == "git push failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("npm", "install", "--save-dev", "release-it"),
            returncode=1,
            stdout="",
            stderr="",
        )
        assert str(error) == "npm install --save-dev ... failed (exit 1)"

    def test_message_includes_start_failure(self) -> None:
        error = ProcessError(("pnpm",), -1, "", "No such file or directory")
        assert error.message == "pnpm failed (exit -1) - No such file or directory"

    def test_message_omits_stderr_for_exit_codes(self) -> None:
        error = ProcessError(("yarn", "add"), 1, "", "noise")
        assert error.message == "yarn add failed (exit 1)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    """Test run function."""

    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('9.8.1')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert result.value.strip() == "9.8.1"

    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert Path(result.value.strip()).resolve() == tmp_path.resolve()

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(42)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert result.error.returncode == 42
        assert "bad" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_timeout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "import time; time.sleep(5)"], cwd=tmp_path, timeout=0.2)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert "timed out" in result.error.stderr


class TestRunStreaming:
    """Test run_streaming function."""

    def test_success(self, tmp_path: Path) -> None:
        result = run_streaming([sys.executable, "-c", "pass"], cwd=tmp_path)
        assert result == Ok(None)

    def test_failure_keeps_exit_code(self, tmp_path: Path) -> None:
        result = run_streaming([sys.executable, "-c", "import sys; sys.exit(3)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert result.error.stdout == ""

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_streaming(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.stderr
