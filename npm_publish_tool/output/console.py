"""Console output abstraction.

Services print categorized status lines through ``ConsoleProtocol`` instead of
calling ``print`` or Rich directly. ``RichConsole`` is the production backend;
``MockConsole`` records everything for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()  # Green, positive message
    ERROR = auto()  # Red, failure marker
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    BOLD = auto()
    HEADER = auto()
    STEP = auto()  # Numbered pipeline step
    FILE = auto()  # File created/updated

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Interface for writing styled status lines."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None:
        """Print a section header followed by an underline."""
        ...

    def step(self, number: int, message: str) -> None:
        """Print ``Step N: message`` for a pipeline step."""
        ...

    def file_operation(self, operation: str, path: str) -> None:
        """Print ``Operation: path`` (e.g. ``Created: .release-it.json``)."""
        ...

    def package_manager(self, name: str, version: str) -> None: ...

    def separator(self) -> None: ...

    def newline(self) -> None: ...


SEPARATOR_WIDTH = 50


class RichConsole:
    """Console implementation backed by Rich."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.markup import escape

        self._console = Console(highlight=False)
        self._escape = escape
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.BOLD: "bold",
            Style.HEADER: "magenta bold",
            Style.STEP: "cyan",
            Style.FILE: "blue",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self._console.print(f"[green]OK[/green] {self._escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {self._escape(message)}")

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {self._escape(message)}")

    def header(self, message: str) -> None:
        self._console.print(f"\n[magenta bold]{self._escape(message)}[/magenta bold]")
        self._console.print("─" * (len(message) + 4), style="dim", markup=False)

    def step(self, number: int, message: str) -> None:
        self._console.print(f"[cyan]Step {number}:[/cyan] {self._escape(message)}")

    def file_operation(self, operation: str, path: str) -> None:
        self._console.print(f"[blue]{self._escape(operation)}:[/blue] {self._escape(path)}")

    def package_manager(self, name: str, version: str) -> None:
        self._console.print(
            f"[cyan]Detected package manager:[/cyan] {self._escape(f'{name} ({version})')}"
        )

    def separator(self) -> None:
        self._console.print("─" * SEPARATOR_WIDTH, style="dim", markup=False)

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def step(self, number: int, message: str) -> None:
        self.outputs.append(OutputRecord(f"Step {number}: {message}", Style.STEP))

    def file_operation(self, operation: str, path: str) -> None:
        self.outputs.append(OutputRecord(f"{operation}: {path}", Style.FILE))

    def package_manager(self, name: str, version: str) -> None:
        self.outputs.append(
            OutputRecord(f"Detected package manager: {name} ({version})", Style.INFO)
        )

    def separator(self) -> None:
        self.outputs.append(OutputRecord("─" * SEPARATOR_WIDTH, Style.DIM))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_success(self) -> bool:
        return any(o.style == Style.SUCCESS for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
