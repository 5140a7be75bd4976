"""Utility functions for number formatting, time parsing and status emission."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from pytimeparse2 import parse as parse_duration

from ffedit.models.verbosity import Verbosity

LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Format ``value`` for an FFmpeg argument.

    Uses the shortest representation that round-trips and drops a trailing
    ``.0``, so ``2.0`` becomes ``"2"`` while ``0.5`` stays ``"0.5"``.
    """
    text = repr(float(value))
    return text.removesuffix(".0")


def parse_timespan_to_seconds(s: str | None) -> float | None:
    """Convert a time string to seconds.

    Args:
        s: Plain seconds such as ``"5"`` or ``"2.5"``, or a timespan such as
            ``"90s"`` or ``"00:01:30"``. ``None`` or an empty string returns
            ``None``.

    Returns:
        The parsed duration in seconds.

    Raises:
        ValueError: If ``s`` cannot be parsed.

    """
    if s is None or not s.strip():
        return None
    try:
        return float(s)
    except ValueError:
        pass
    parsed = parse_duration(s.strip())
    if parsed is None:
        raise ValueError(f"Unable to parse timespan: {s}")
    return float(parsed)


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    * ``print`` - used by the CLI for direct terminal updates. Messages that
      contain ``\\r`` but no newline are written in place.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for embedding or tests.
    """
    if status_callback is None:
        logger.info(message)
        return
    if status_callback is print:
        print(  # noqa: T201
            message,
            end="" if "\r" in message and "\n" not in message else "\n",
            flush=True,
        )
        return
    status_callback(message)


def format_action_label(*, dry_run: bool, cached: bool = False) -> str:
    """Return a short action label for command banners."""
    if cached:
        return "Cached"
    if dry_run:
        return "Command"
    return "Running"


def maybe_log_command(
    *,
    verbosity: Verbosity,
    dry_run: bool,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Emit a command banner at ``Verbosity.COMMANDS`` and above, or in dry-run mode."""
    if verbosity >= Verbosity.COMMANDS or dry_run:
        emit_status(banner, status_callback=status_callback)


def log_file_path() -> Path:
    """Return the log file location, honoring ``FFEDIT_LOG``."""
    override = os.getenv("FFEDIT_LOG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".ffedit" / "ffedit.log"


def ensure_log_file_handler() -> None:
    """Attach a rotating file handler to the root logger."""
    try:
        lf = log_file_path()
        lf.parent.mkdir(parents=True, exist_ok=True)
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)
        exists = any(
            isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == lf.absolute() for h in root.handlers
        )
        if not exists:
            fh = RotatingFileHandler(lf, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8")
            fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
            root.addHandler(fh)
    except OSError:  # pragma: no cover - best effort
        logger.debug("Could not attach log file handler", exc_info=True)


__all__ = [
    "emit_status",
    "ensure_log_file_handler",
    "format_action_label",
    "format_number",
    "log_file_path",
    "maybe_log_command",
    "parse_timespan_to_seconds",
]
