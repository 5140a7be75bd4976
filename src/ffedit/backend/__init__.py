"""Backend utilities for building and executing FFmpeg commands."""

from .builder import build_command
from .executor import EditResult, ffedit, run_edit

__all__ = [
    "EditResult",
    "build_command",
    "ffedit",
    "run_edit",
]
