"""Verbosity levels for status output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much ffedit reports while it works."""

    QUIET = 0
    COMMANDS = 1  # show the ffmpeg command line
    OUTPUT = 2  # also stream ffprobe output


__all__ = ["Verbosity"]
