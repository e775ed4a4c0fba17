"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)
from .progress import ProgressBar, render_bar

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "ProgressBar",
    "RichConsole",
    "Style",
    "render_bar",
]
