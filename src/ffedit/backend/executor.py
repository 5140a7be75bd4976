"""Build and execute FFmpeg commands."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from ffedit.models import EditPlan, Options, RuntimeContext
from ffedit.tools import format_ffmpeg_cmd, run_ffmpeg
from ffedit.tools.helpers import emit_status, format_action_label, maybe_log_command

from .builder import build_command

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
else:
    from collections import abc

    Callable = abc.Callable
    Sequence = abc.Sequence

Runner = Callable[[Sequence[str]], object]  #: Runs FFmpeg with the given arguments; raises on failure.

EDIT_FAILED = "Edit failed"
PROCESSING_MESSAGE = "Processing video..."

logger = logging.getLogger(__name__)


@dataclass
class EditResult:
    """Result of an FFmpeg execution."""

    success: bool
    error: str = ""
    output: str | None = None


def _show_processing(status_callback: Callable[[str], None] | None, *, clear: bool = False) -> None:
    """Show or clear the transient processing line.

    On a terminal the line is drawn in place and wiped afterwards. Other
    callbacks only receive the message once.
    """
    if status_callback is print:
        blank = " " * len(PROCESSING_MESSAGE)
        emit_status(f"\r{blank}\r" if clear else f"{PROCESSING_MESSAGE}\r", status_callback=status_callback)
    elif not clear:
        emit_status(PROCESSING_MESSAGE, status_callback=status_callback)


def execute_ffmpeg(
    args: tuple[str, ...],
    output: str,
    *,
    status_callback: Callable[[str], None] | None = None,
    runner: Runner | None = None,
) -> EditResult:
    """Execute an FFmpeg command and return result.

    ``runner`` receives the argument list and performs the process call. The
    default streams FFmpeg's output to ``status_callback`` as it arrives and
    keeps a copy so a failure can report what FFmpeg printed.
    """
    run_func = runner or partial(run_ffmpeg, verbose=True, status_callback=status_callback)
    _show_processing(status_callback)
    try:
        run_func(args)
    except subprocess.CalledProcessError as e:
        detail = (e.stdout or "").strip() if isinstance(e.stdout, str) else ""
        return EditResult(success=False, error=f"{EDIT_FAILED}: {detail or e}")
    except OSError as e:
        return EditResult(success=False, error=f"{EDIT_FAILED}: {e!s}")
    finally:
        _show_processing(status_callback, clear=True)
    return EditResult(success=True, output=output)


def run_edit(
    opts: Options,
    status_callback: Callable[[str], None] | None = None,
    runner: Runner | None = None,
) -> tuple[tuple[str, ...], EditResult]:
    """Plan, build and (unless dry-running) execute the FFmpeg command for ``opts``.

    Returns the argument list (empty when planning failed) and the result.
    """
    with RuntimeContext(
        verbosity=opts.runtime.verbosity,
        dry_run=opts.runtime.dry_run,
        status_callback=status_callback,
    ) as runtime:
        try:
            plan = EditPlan.from_options(opts, runtime)
        except ValueError as e:
            return (), EditResult(success=False, error=f"{EDIT_FAILED}: {e}")
        if plan.renamed:
            emit_status(
                f"{plan.requested_output} already exists, writing to {plan.output_path}",
                status_callback=status_callback,
            )
        args = build_command(plan)
        output = str(plan.output_path)
        dry_run = opts.runtime.dry_run
        maybe_log_command(
            verbosity=opts.runtime.verbosity,
            dry_run=dry_run,
            status_callback=status_callback,
            banner=f"{format_action_label(dry_run=dry_run)}: {format_ffmpeg_cmd(args)}",
        )
        if dry_run:
            return args, EditResult(success=True, output=output)
        result = execute_ffmpeg(args, output, status_callback=status_callback, runner=runner)
        if result.success:
            emit_status(f"{output} has been written", status_callback=status_callback)
        else:
            logger.error("FFmpeg failed for %s: %s", opts.input, result.error)
        return args, result


def ffedit(
    opts: Options,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Apply speed, pitch, trim and mute edits to a video with FFmpeg."""
    status_func = print if status_callback is None else status_callback
    _, result = run_edit(opts, status_callback=status_func)
    if not result.success:
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(result.error)
        return 1
    return 0
