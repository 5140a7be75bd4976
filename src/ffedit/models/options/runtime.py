"""Runtime option models."""

from __future__ import annotations

from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, BeforeValidator, Field

from ffedit.models.verbosity import Verbosity

from .defaults import DEFAULT_VERBOSITY
from .groups import RUNTIME_GROUP


def _coerce_verbosity(value: object) -> object:
    """Map level names in any case, and digit strings, onto ``Verbosity`` input.

    Anything else is left for pydantic's enum validation to accept or reject.
    """
    if isinstance(value, str):
        token = value.strip().upper()
        if token in Verbosity.__members__:
            return Verbosity[token]
        if token.isdigit():
            return int(token)
    return value


@Parameter(group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """How ffedit reports and whether it runs FFmpeg at all."""

    verbosity: Annotated[Verbosity, BeforeValidator(_coerce_verbosity)] = Field(
        default=DEFAULT_VERBOSITY,
        description="quiet: results only; commands: echo the FFmpeg command; output: also show ffprobe activity.",
    )
    dry_run: bool = Field(default=False, description="Show the FFmpeg command and stop before running it.")


__all__ = ["RuntimeOptions"]
