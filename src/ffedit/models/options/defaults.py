"""Default constants for option models."""

from __future__ import annotations

from ffedit.models.verbosity import Verbosity

DEFAULT_SPEED = 1.0
DEFAULT_OUTPUT_STEM = "Output"
DEFAULT_VERBOSITY = Verbosity.COMMANDS

__all__ = [
    "DEFAULT_OUTPUT_STEM",
    "DEFAULT_SPEED",
    "DEFAULT_VERBOSITY",
]
