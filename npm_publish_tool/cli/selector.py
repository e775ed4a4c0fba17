"""Arrow-key single choice prompt for interactive terminals.

The prompt is drawn below the existing output and redrawn in place, so
anything printed before it (such as the current version) stays visible.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, TypeVar

T = TypeVar("T")

_POINTER = "\u276f"
_KEYS_HINT = "Up/Down to move, Enter to select, q to cancel"


@dataclass(frozen=True, slots=True)
class SelectorOption[T]:
    value: T
    label: str
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class SelectorResult[T]:
    action: Literal["select", "cancel"]
    value: T | None
    index: int


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _color_enabled() -> bool:
    if not is_interactive_terminal():
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    term = os.getenv("TERM", "")
    return term.lower() != "dumb"


def _paint(text: str, *codes: str) -> str:
    if not _color_enabled() or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _decode_key(ch: str, read: Callable[[], str] | None = None) -> str:
    if ch in ("\r", "\n"):
        return "enter"
    # Raw mode delivers Ctrl-C as a character instead of SIGINT.
    if ch in ("q", "Q", "\x03"):
        return "cancel"
    if ch in ("k", "K"):
        return "up"
    if ch in ("j", "J"):
        return "down"
    if ch == "\x1b" and read is not None:
        c2 = read()
        if c2 == "[":
            c3 = read()
            if c3 == "A":
                return "up"
            if c3 == "B":
                return "down"
        return "cancel"
    return "other"


def _read_key() -> str:
    if os.name == "nt":
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            ch2 = msvcrt.getwch()
            if ch2 == "H":
                return "up"
            if ch2 == "P":
                return "down"
            return "other"
        if ch == "\x1b":
            return "cancel"
        return _decode_key(ch)

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return _decode_key(sys.stdin.read(1), lambda: sys.stdin.read(1))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def _cols() -> int:
    return max(40, shutil.get_terminal_size((80, 24)).columns)


def render_options(*, options: list[SelectorOption[object]], index: int) -> list[str]:
    """One row per option, a pointer on the highlighted one, then its detail."""
    width = _cols() - 1
    lines: list[str] = []
    for i, opt in enumerate(options):
        if i == index:
            row = _truncate(f"{_POINTER} {opt.label.strip()}", width)
            lines.append(_paint(row, "1", "36"))
        else:
            lines.append(_truncate(f"  {opt.label.strip()}", width))

    detail = (options[index].detail or "").strip()
    if detail:
        lines.append("")
        lines.append(_paint(_truncate(detail, width), "2"))
    return lines


def _render(
    *,
    title: str,
    subtitle: str | None,
    options: list[SelectorOption[object]],
    index: int,
    previous: int,
) -> int:
    """Draw the prompt below the current output, replacing the previous frame.

    Every line is truncated to the terminal width so the frame height is the
    line count. Returns that height.
    """
    if previous:
        sys.stdout.write(f"\x1b[{previous}F\x1b[J")

    width = _cols() - 1
    lines = [_paint(_truncate(title, width), "1", "96")]
    if subtitle is not None:
        lines.append(_paint(_truncate(subtitle, width), "2"))
    lines.extend(render_options(options=options, index=index))
    lines.append(_paint(_truncate(_KEYS_HINT, width), "2"))

    sys.stdout.write("\n".join(lines) + "\n")
    sys.stdout.flush()
    return len(lines)


def select_one[T](
    *,
    title: str,
    options: list[SelectorOption[T]],
    subtitle: str | None = None,
    initial_index: int = 0,
) -> SelectorResult[T]:
    """Let the user pick one option with the arrow keys.

    Enter selects; ``q``, Esc and Ctrl-C cancel.

    Raises:
        ValueError: ``options`` is empty.
        RuntimeError: stdin/stdout is not a terminal.
    """
    if not options:
        raise ValueError("selector requires at least one option")
    if not is_interactive_terminal():
        raise RuntimeError("interactive selector requires a TTY")

    idx = max(0, min(initial_index, len(options) - 1))
    casted: list[SelectorOption[object]] = [
        SelectorOption(value=o.value, label=o.label, detail=o.detail) for o in options
    ]

    drawn = 0
    while True:
        drawn = _render(title=title, subtitle=subtitle, options=casted, index=idx, previous=drawn)
        key = _read_key()

        if key == "up":
            idx = (idx - 1) % len(options)
            continue
        if key == "down":
            idx = (idx + 1) % len(options)
            continue
        if key == "enter":
            return SelectorResult(action="select", value=options[idx].value, index=idx)
        if key == "cancel":
            return SelectorResult(action="cancel", value=None, index=idx)
