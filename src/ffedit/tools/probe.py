"""ffprobe queries with results cached per file version."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING, TypeVar

from ffedit.models.context import RuntimeContext
from ffedit.models.verbosity import Verbosity

from .cli import FFPROBE, cache_key, get_ffprobe_version, join_command, run_ffprobe
from .helpers import emit_status, format_action_label

if TYPE_CHECKING:
    from collections.abc import Callable

DURATION_ENTRY = "format=duration"

_VERSION_KEY = "ffprobe:version"
_MISS: tuple[bool, str | None] = (False, None)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _announce(ctx: RuntimeContext, cmd: list[str], *, cached: bool = False) -> None:
    if ctx.verbosity < Verbosity.OUTPUT:
        return
    label = format_action_label(dry_run=ctx.dry_run, cached=cached)
    emit_status(f"{label}: {join_command(FFPROBE, cmd)}", status_callback=ctx.status_callback)


def clear_cache(ctx: RuntimeContext | None = None) -> None:
    """Forget every cached probe result and tool check."""
    if ctx is not None:
        ctx.cache.clear()
        return
    with RuntimeContext() as own:
        own.cache.clear()


def check_version(ctx: RuntimeContext) -> str:
    """Return the ``ffprobe`` version line, asking the binary once per cache.

    Raises:
        RuntimeError: If ``ffprobe`` cannot be started.

    """
    known = ctx.cache.get(_VERSION_KEY)
    if isinstance(known, str):
        return known
    try:
        line = get_ffprobe_version()
    except FileNotFoundError as e:  # pragma: no cover - system-dependent
        raise RuntimeError(f"{FFPROBE} not found; it is required to trim from the end") from e
    ctx.cache[_VERSION_KEY] = line
    return line


def run(ctx: RuntimeContext, cmd: list[str]) -> str | None:
    """Return the stripped output of ``ffprobe cmd``, or ``None``.

    ``None`` stands for both a failed run and empty output. Either outcome is
    cached, keyed on the arguments plus the size and mtime of any file among
    them, so an edited file is probed again.
    """
    key = cache_key([FFPROBE, *cmd])
    hit = ctx.cache.get(key)
    if hit is not None:
        _announce(ctx, cmd, cached=True)
        ok, payload = hit
        return payload if ok else None
    _announce(ctx, cmd)
    try:
        out = run_ffprobe(cmd, verbose=ctx.verbosity >= Verbosity.OUTPUT, status_callback=ctx.status_callback)
    except subprocess.CalledProcessError as exc:
        logger.warning("%s exited with %s: %s", FFPROBE, exc.returncode, join_command(FFPROBE, cmd), exc_info=exc)
        ctx.cache[key] = _MISS
        return None
    payload = out.strip() or None
    ctx.cache[key] = (True, payload)
    return payload


def entry_command(entry: str, path: str) -> list[str]:
    """Arguments that print the bare value of one ``-show_entries`` entry of ``path``."""
    return ["-v", "quiet", "-show_entries", entry, "-of", "csv=p=0", path]


def query(ctx: RuntimeContext, path: str, entry: str, *, convert: Callable[[str], T]) -> T | None:
    """Read ``entry`` from ``path`` and convert it, or return ``None`` when absent or unparsable."""
    out = run(ctx, entry_command(entry, path))
    if out is None:
        return None
    try:
        return convert(out)
    except (ValueError, TypeError):
        logger.debug("Unexpected %s value for %s: %r", entry, path, out)
        return None


def get_video_duration_sec(ctx: RuntimeContext, path: str) -> float | None:
    """Return the container duration of ``path`` in seconds."""
    return query(ctx, path, DURATION_ENTRY, convert=float)


__all__ = [
    "DURATION_ENTRY",
    "check_version",
    "clear_cache",
    "entry_command",
    "get_video_duration_sec",
    "query",
    "run",
]
