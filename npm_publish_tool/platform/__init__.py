"""Operating-system boundary: subprocesses and files."""

from .files import atomic_write_text, copy_file, make_executable
from .process import ProcessError, run, run_streaming

__all__ = [
    # files
    "atomic_write_text",
    "copy_file",
    "make_executable",
    # process
    "ProcessError",
    "run",
    "run_streaming",
]
