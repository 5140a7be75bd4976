"""FFmpeg-related helper utilities."""

from . import capabilities, probe
from .cli import (
    check_ffmpeg_version,
    format_ffmpeg_cmd,
    get_ffmpeg_version,
    get_ffprobe_version,
    run_ffmpeg,
    run_ffprobe,
)
from .helpers import emit_status, format_number, parse_timespan_to_seconds

__all__ = [
    "capabilities",
    "check_ffmpeg_version",
    "emit_status",
    "format_ffmpeg_cmd",
    "format_number",
    "get_ffmpeg_version",
    "get_ffprobe_version",
    "parse_timespan_to_seconds",
    "probe",
    "run_ffmpeg",
    "run_ffprobe",
]
