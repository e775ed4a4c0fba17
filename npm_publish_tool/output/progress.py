"""Step progress bar for the scaffolding pipeline."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from npm_publish_tool.output.console import Style

if TYPE_CHECKING:
    from npm_publish_tool.output.console import ConsoleProtocol

__all__ = ["ProgressBar", "render_bar"]

BAR_WIDTH = 20


def _round_half_up(value: float) -> int:
    # 12.5 -> 13, unlike round()
    return math.floor(value + 0.5)


def render_bar(current: int, total: int) -> str:
    """Render ``Progress: [███░░...] NN%`` for ``current`` of ``total`` steps."""
    if total < 1:
        raise ValueError("progress total must be at least 1")
    percentage = _round_half_up(current / total * 100)
    filled = _round_half_up(percentage / 5)
    return f"Progress: [{'█' * filled}{'░' * (BAR_WIDTH - filled)}] {percentage}%"


class ProgressBar:
    """Counts completed steps and prints the bar after each one.

    A zero-step bar cannot be constructed; every pipeline has at least one
    step.
    """

    def __init__(self, total: int, console: ConsoleProtocol) -> None:
        if total < 1:
            raise ValueError("progress total must be at least 1")
        self._total = total
        self._current = 0
        self._console = console

    @property
    def current(self) -> int:
        return self._current

    @property
    def total(self) -> int:
        return self._total

    def increment(self) -> str:
        self._current = min(self._current + 1, self._total)
        return self._show()

    def _show(self) -> str:
        line = render_bar(self._current, self._total)
        self._console.print(line, Style.INFO)
        return line
