"""Detection of optional FFmpeg filters."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from .cli import FFMPEG, cache_key, run_ffmpeg

if TYPE_CHECKING:
    from ffedit.models.context import RuntimeContext

RUBBERBAND_PROBE = "rubberband=pitch=1.0"
_SILENT_AUDIO = "anullsrc=r=48000:cl=stereo:d=0.1"

logger = logging.getLogger(__name__)


def _audio_filter_probe(audio_filter: str) -> list[str]:
    """Arguments pushing a tenth of a second of silence through ``audio_filter``."""
    return [
        "-hide_banner",
        "-loglevel",
        "error",
        "-f",
        "lavfi",
        "-i",
        _SILENT_AUDIO,
        "-af",
        audio_filter,
        "-f",
        "null",
        "-",
    ]


def _filter_works(ctx: RuntimeContext, audio_filter: str) -> bool:
    args = _audio_filter_probe(audio_filter)
    key = cache_key([FFMPEG, *args])
    known = ctx.cache.get(key)
    if known is not None:
        return bool(known)
    try:
        run_ffmpeg(args)
    except (FileNotFoundError, subprocess.CalledProcessError):
        works = False
    else:
        works = True
    logger.debug("Audio filter %s %s", audio_filter, "works" if works else "is unavailable")
    ctx.cache[key] = works
    return works


def has_rubberband(ctx: RuntimeContext) -> bool:
    """Return True if FFmpeg was built with the ``rubberband`` audio filter.

    Pitch shifting needs it, and it is only present in builds configured
    with ``--enable-librubberband``.
    """
    return _filter_works(ctx, RUBBERBAND_PROBE)


__all__ = ["has_rubberband"]
