"""Edit planning models and output path resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ffedit.tools import capabilities, cli, probe
from ffedit.tools.helpers import format_number

from .options import DEFAULT_OUTPUT_STEM, Options
from .types import Container

if TYPE_CHECKING:
    from collections.abc import Callable

    from .context import RuntimeContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditPlan:
    """Execution plan resolved from user options."""

    opts: Options
    ctx: RuntimeContext
    container: Container
    requested_output: Path
    output_path: Path
    start_sec: float | None
    duration_sec: float | None

    @property
    def renamed(self) -> bool:
        """Whether the requested output was taken and a suffixed name chosen."""
        return self.output_path != self.requested_output

    @classmethod
    def from_options(cls, opts: Options, ctx: RuntimeContext) -> EditPlan:
        """Create a plan from validated options.

        Raises:
            ValueError: If a required tool or filter is unavailable, or the
                trim options leave nothing to output.

        """
        _ensure_tools(ctx, opts)
        container = opts.container
        start_sec = opts.trim_start_sec or None
        duration_sec = _resolve_duration(ctx, opts)
        requested = derive_output_path(opts.output, container)
        output_path = resolve_output_path(requested)
        if output_path != requested:
            logger.debug("Output %s exists; using %s", requested, output_path)
        return cls(
            opts=opts,
            ctx=ctx,
            container=container,
            requested_output=requested,
            output_path=output_path,
            start_sec=start_sec,
            duration_sec=duration_sec,
        )


def _ensure_tools(ctx: RuntimeContext, opts: Options) -> None:
    """Validate that ffmpeg, and whatever else ``opts`` needs, is available."""
    try:
        cli.check_ffmpeg_version(ctx)
        if opts.trim_end_sec:
            probe.check_version(ctx)
    except (OSError, RuntimeError) as e:  # pragma: no cover - environment dependent
        raise ValueError(str(e)) from e
    if opts.pitch_shifts and not capabilities.has_rubberband(ctx):
        raise ValueError("Pitch shifting needs an FFmpeg build with the rubberband filter")


def _resolve_duration(ctx: RuntimeContext, opts: Options) -> float | None:
    """Return the output duration in seconds, or ``None`` to keep the rest of the source.

    ``trim_to`` is used as is. ``trim_end`` is measured from the end of the
    source, so the source duration is probed and the start offset removed.
    """
    if opts.trim_to_sec:
        return opts.trim_to_sec
    if not opts.trim_end_sec:
        return None
    total = probe.get_video_duration_sec(ctx, str(opts.input))
    if total is None:
        raise ValueError(f"Could not read video duration from: {opts.input}")
    duration = total - (opts.trim_start_sec or 0.0) - opts.trim_end_sec
    if duration <= 0:
        raise ValueError(
            f"Trimming leaves nothing to output: source is {format_number(total)}s, "
            f"start trim {format_number(opts.trim_start_sec or 0.0)}s, "
            f"end trim {format_number(opts.trim_end_sec)}s"
        )
    logger.debug("Resolved trim-end duration: %s", duration)
    return duration


def derive_output_path(output: Path | None, container: Container) -> Path:
    """Derive the requested output path before collision handling.

    Without an explicit output, or with the bare ``Output.`` form, the name
    is ``Output`` plus the source extension in the working directory. An
    explicit path without an extension gets the source extension. Anything
    else is used as given.
    """
    if output is None:
        return Path(f"{DEFAULT_OUTPUT_STEM}{container.extension}")
    p = Path(output).expanduser()
    if p.suffix in {"", "."}:
        p = p.with_name(p.name.rstrip(".") + container.extension)
    return p


def resolve_output_path(requested: Path, *, exists: Callable[[Path], bool] | None = None) -> Path:
    """Return the first path in ``requested``, ``{stem}1{ext}``, ``{stem}2{ext}``, ... that is free.

    Stem, extension and directory always come from ``requested``. ``exists``
    defaults to :meth:`pathlib.Path.exists` and is probed once per candidate.
    """
    check = exists or Path.exists
    candidate = requested
    counter = 0
    while check(candidate):
        counter += 1
        candidate = requested.with_name(f"{requested.stem}{counter}{requested.suffix}")
    return candidate


__all__ = ["EditPlan", "derive_output_path", "resolve_output_path"]
