"""Command-line video edits (speed, pitch, trim, mute) on top of FFmpeg."""

from .backend import build_command, ffedit, run_edit
from .models import Options

__all__ = ["Options", "build_command", "ffedit", "run_edit"]
