"""Package-manager detection and dev-dependency installs.

The manager is chosen by lock file, in a fixed priority order: a project that
carries both ``pnpm-lock.yaml`` and ``yarn.lock`` is treated as pnpm.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from npm_publish_tool.core.result import Err, Ok, Result
from npm_publish_tool.platform.process import ProcessError, run, run_streaming

if TYPE_CHECKING:
    from npm_publish_tool.output.console import ConsoleProtocol

__all__ = [
    "UNKNOWN_VERSION",
    "PackageManager",
    "PackageManagerInfo",
    "detect_package_manager",
    "get_package_manager_info",
    "install_command",
    "install_package",
]

UNKNOWN_VERSION = "unknown"


class PackageManager(StrEnum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def lock_file(self) -> str:
        return _LOCK_FILES[self]


_LOCK_FILES: dict[PackageManager, str] = {
    PackageManager.PNPM: "pnpm-lock.yaml",
    PackageManager.YARN: "yarn.lock",
    PackageManager.NPM: "package-lock.json",
}

# First match wins.
_DETECTION_ORDER = (PackageManager.PNPM, PackageManager.YARN, PackageManager.NPM)


@dataclass(frozen=True, slots=True)
class PackageManagerInfo:
    name: PackageManager
    version: str


def detect_package_manager(root: Path) -> PackageManager:
    """Return the package manager managing ``root``, defaulting to npm."""
    for pm in _DETECTION_ORDER:
        if (root / pm.lock_file).exists():
            return pm
    return PackageManager.NPM


def get_package_manager_info(root: Path) -> PackageManagerInfo:
    """Detect the manager and probe its version.

    The probe is informational: a missing binary or a failing ``--version``
    reports ``"unknown"`` instead of an error.
    """
    pm = detect_package_manager(root)
    match run([str(pm), "--version"], cwd=root):
        case Ok(stdout):
            version = stdout.strip() or UNKNOWN_VERSION
        case Err(_):
            version = UNKNOWN_VERSION
    return PackageManagerInfo(name=pm, version=version)


def install_command(pm: PackageManager, package: str, *, dev: bool) -> list[str]:
    match pm:
        case PackageManager.PNPM:
            cmd = ["pnpm", "add", package]
            dev_flag = "--save-dev"
        case PackageManager.YARN:
            cmd = ["yarn", "add", package]
            dev_flag = "--dev"
        case PackageManager.NPM:
            cmd = ["npm", "install", package]
            dev_flag = "--save-dev"
    if dev:
        cmd.append(dev_flag)
    return cmd


def install_package(
    package: str,
    root: Path,
    *,
    console: ConsoleProtocol,
    dev: bool = False,
) -> Result[None, ProcessError]:
    """Install ``package`` into ``root`` with the detected package manager.

    The package manager's own output streams to the terminal.
    """
    pm = detect_package_manager(root)
    console.info(f"Installing {package} using {pm}...")
    return run_streaming(install_command(pm, package, dev=dev), cwd=root)
