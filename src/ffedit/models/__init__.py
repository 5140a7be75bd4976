"""Expose models and type definitions."""

from .context import RuntimeContext
from .options import Options, RuntimeOptions
from .plan import EditPlan, derive_output_path, resolve_output_path
from .types import Container
from .verbosity import Verbosity

__all__ = [
    "Container",
    "EditPlan",
    "Options",
    "RuntimeContext",
    "RuntimeOptions",
    "Verbosity",
    "derive_output_path",
    "resolve_output_path",
]
