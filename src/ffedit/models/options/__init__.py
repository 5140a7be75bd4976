"""Options package exports."""

from __future__ import annotations

from ffedit.models.verbosity import Verbosity

from .defaults import DEFAULT_OUTPUT_STEM, DEFAULT_SPEED, DEFAULT_VERBOSITY
from .options import Options
from .runtime import RuntimeOptions

__all__ = [
    "DEFAULT_OUTPUT_STEM",
    "DEFAULT_SPEED",
    "DEFAULT_VERBOSITY",
    "Options",
    "RuntimeOptions",
    "Verbosity",
]
