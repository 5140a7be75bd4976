"""Option models and validation logic."""

from __future__ import annotations

import math
from functools import cached_property
from pathlib import Path
from typing import Annotated, ClassVar

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ffedit.models.types import Container
from ffedit.tools.helpers import parse_timespan_to_seconds

from .defaults import DEFAULT_OUTPUT_STEM, DEFAULT_SPEED
from .groups import AUDIO_GROUP, OUTPUT_GROUP, PITCH_GROUP, SOURCE_GROUP, SPEED_GROUP, TRIM_GROUP
from .runtime import RuntimeOptions


@Parameter(name="*")
class Options(BaseModel):
    """Options for a single ffedit run."""

    TIME_DESC_TEMPLATE: ClassVar[str] = "{} Examples: '5', '2.5', '90s', '1m30s', '00:01:30'."

    input: Annotated[
        Path,
        Parameter(group=SOURCE_GROUP),
    ] = Field(description="Path to the source video (.mp4 or .mov).")
    output: Annotated[
        Path | None,
        Parameter(group=OUTPUT_GROUP),
    ] = Field(
        default=None,
        description=(
            f"Path for the output file. Defaults to '{DEFAULT_OUTPUT_STEM}' with the source extension. "
            "A number is appended to the name when the file already exists."
        ),
    )
    speed: Annotated[
        float,
        Parameter(group=SPEED_GROUP),
    ] = Field(DEFAULT_SPEED, gt=0, allow_inf_nan=False, description="Playback speed multiplier.")
    pitch_up: Annotated[
        float | None,
        Parameter(group=PITCH_GROUP),
    ] = Field(None, allow_inf_nan=False, description="Raise the audio pitch by this many semitones.")
    pitch_down: Annotated[
        float | None,
        Parameter(group=PITCH_GROUP),
    ] = Field(None, allow_inf_nan=False, description="Lower the audio pitch by this many semitones.")
    trim_start: Annotated[
        str | None,
        Parameter(group=TRIM_GROUP),
    ] = Field(None, description=TIME_DESC_TEMPLATE.format("Cut this much from the start."))
    trim_end: Annotated[
        str | None,
        Parameter(group=TRIM_GROUP),
    ] = Field(None, description=TIME_DESC_TEMPLATE.format("Cut this much from the end."))
    trim_to: Annotated[
        str | None,
        Parameter(group=TRIM_GROUP),
    ] = Field(None, description=TIME_DESC_TEMPLATE.format("Limit the output to this duration."))
    mute: Annotated[
        bool,
        Parameter(group=AUDIO_GROUP),
    ] = Field(default=False, description="Drop the audio track.")
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    model_config = ConfigDict(extra="forbid")

    @field_validator("input")
    @classmethod
    def validate_input(cls, v: Path) -> Path:
        """Ensure the source has an accepted extension and exists."""
        Container.from_path(v)
        path = v.expanduser()
        if not path.is_file():
            raise ValueError(f"Input path is not a file: {path}")
        return path

    @field_validator("trim_start", "trim_end", "trim_to", mode="before")
    @classmethod
    def validate_time_format(cls, v: object) -> str | None:
        """Ensure trim values parse to a non-negative number of seconds."""
        if v is None:
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError(f"Invalid time format: {v!r}")
        try:
            seconds = parse_timespan_to_seconds(v)
        except ValueError as exc:
            raise ValueError(f"Invalid time format: {v}") from exc
        if seconds is not None and (not math.isfinite(seconds) or seconds < 0):
            raise ValueError(f"Trim values must be finite and not negative: {v}")
        return v

    @model_validator(mode="after")
    def validate_duration_sources(self) -> Options:
        """Reject options that fix the output duration twice."""
        if self.trim_to_sec and self.trim_end_sec:
            raise ValueError("Cannot specify both 'trim_to' and 'trim_end'")
        return self

    @property
    def container(self) -> Container:
        """Container of the source file."""
        return Container.from_path(self.input)

    @cached_property
    def trim_start_sec(self) -> float | None:
        """Seconds to cut from the start."""
        return parse_timespan_to_seconds(self.trim_start)

    @cached_property
    def trim_end_sec(self) -> float | None:
        """Seconds to cut from the end."""
        return parse_timespan_to_seconds(self.trim_end)

    @cached_property
    def trim_to_sec(self) -> float | None:
        """Output duration in seconds."""
        return parse_timespan_to_seconds(self.trim_to)

    @property
    def pitch_shifts(self) -> tuple[float, ...]:
        """Requested pitch shifts in semitones, upward first.

        Zero shifts are dropped since they leave the pitch unchanged.
        """
        shifts: list[float] = []
        if self.pitch_up:
            shifts.append(self.pitch_up)
        if self.pitch_down:
            shifts.append(-self.pitch_down)
        return tuple(shifts)


__all__ = ["Options"]
