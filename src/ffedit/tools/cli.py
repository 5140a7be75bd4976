"""Running FFmpeg and ffprobe, and showing their command lines."""

from __future__ import annotations

import codecs
import locale
import logging
import os
import shlex
import stat
import subprocess
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from .helpers import emit_status

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ffedit.models.context import RuntimeContext

FFMPEG = "ffmpeg"
FFPROBE = "ffprobe"

_VERSION_KEY = "ffmpeg:version"
_QUOTED_AFTER = frozenset({"-vf", "-af"})
_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)
_READ_SIZE = 4096

logger = logging.getLogger(__name__)


def cache_key(cmd: Sequence[str | Path]) -> tuple[object, ...]:
    """Key ``cmd`` for caching, folding in the mtime and size of each regular file it names."""
    key: list[object] = []
    for token in map(str, cmd):
        key.append(token)
        if token.startswith("-"):
            continue
        try:
            info = Path(token).stat()
        except OSError:
            continue
        if stat.S_ISREG(info.st_mode):
            key += [info.st_mtime_ns, info.st_size]
    return tuple(key)


def _forward_lines(text: str, buf: str, log: Callable[[str], None]) -> str:
    """Send complete lines from ``buf + text`` to ``log`` and return the remainder.

    FFmpeg redraws progress lines with a bare ``\\r``; those are forwarded with
    the carriage return kept so terminals update them in place. ``\\r\\n`` is
    an ordinary line break.
    """
    buf += text
    while True:
        cut = min((i for i in (buf.find("\r"), buf.find("\n")) if i >= 0), default=-1)
        if cut < 0 or (buf[cut] == "\r" and cut == len(buf) - 1):
            return buf
        line, rest = buf[:cut], buf[cut:]
        if rest.startswith("\r\n"):
            log(line)
            buf = rest[2:]
        elif rest.startswith("\r"):
            log(line + "\r")
            buf = rest[1:]
        else:
            log(line)
            buf = rest[1:]


def _stream(cmd: list[str], log: Callable[[str], None]) -> str:
    """Run ``cmd`` and hand its merged stdout/stderr to ``log`` as it arrives.

    Output is read as raw bytes so carriage returns reach ``log`` unchanged.
    Bytes that do not decode in the locale encoding are replaced. The returned
    text has every line break normalized to ``\\n``.

    Raises:
        subprocess.CalledProcessError: On a non-zero exit, carrying everything
            the process printed.

    """
    decoder = codecs.getincrementaldecoder(locale.getpreferredencoding(False))(errors="replace")
    collected: list[str] = []
    pending = ""
    with subprocess.Popen(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        creationflags=_NO_WINDOW,
    ) as proc:
        if proc.stdout is not None:
            for raw in iter(partial(proc.stdout.read1, _READ_SIZE), b""):
                text = decoder.decode(raw)
                collected.append(text)
                pending = _forward_lines(text, pending, log)
        tail = decoder.decode(b"", final=True)
        collected.append(tail)
        pending += tail
        if pending:
            log(pending)
    output = "".join(collected).replace("\r\n", "\n").replace("\r", "\n")
    if proc.returncode:
        raise subprocess.CalledProcessError(proc.returncode, cmd, output)
    return output


def run(
    exe: str | Path,
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
) -> str:
    """Run ``exe`` with ``args`` and return its merged stdout/stderr.

    With ``verbose`` every line is also passed to ``status_callback`` (or the
    logger) while the process is still running.

    Raises:
        subprocess.CalledProcessError: If the process exits non-zero. Its
            output is available as ``stdout``.
        FileNotFoundError: If ``exe`` is not installed.

    """
    cmd = [str(exe), *map(str, args)]
    if verbose:
        return _stream(cmd, partial(emit_status, status_callback=status_callback))
    logger.debug("Running quietly: %s", join_command(exe, args))
    return subprocess.run(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        creationflags=_NO_WINDOW,
        check=True,
    ).stdout


run_ffmpeg = partial(run, FFMPEG)
run_ffprobe = partial(run, FFPROBE)


def _version_line(exe: str) -> str:
    """Return the first line of ``exe -version``.

    Raises:
        FileNotFoundError: If ``exe`` is not installed.
        RuntimeError: If it exits with an error.

    """
    try:
        out = run(exe, ["-version"])
    except subprocess.CalledProcessError as e:  # pragma: no cover - broken install
        raise RuntimeError(f"{exe} -version exited with status {e.returncode}") from e
    first, _, _ = out.partition("\n")
    return first.strip()


def get_ffmpeg_version() -> str:
    return _version_line(FFMPEG)


def get_ffprobe_version() -> str:
    return _version_line(FFPROBE)


def check_ffmpeg_version(ctx: RuntimeContext) -> str:
    """Return the ``ffmpeg`` version line, asking the binary once per cache.

    Raises:
        RuntimeError: If ``ffmpeg`` is not installed or broken.

    """
    known = ctx.cache.get(_VERSION_KEY)
    if isinstance(known, str):
        return known
    try:
        line = get_ffmpeg_version()
    except FileNotFoundError as e:  # pragma: no cover - system-dependent
        raise RuntimeError(f"{FFMPEG} not found on PATH") from e
    logger.debug("Using %s", line)
    ctx.cache[_VERSION_KEY] = line
    return line


def quote_arg(arg: str, *, force: bool = False) -> str:
    """Quote ``arg`` for the platform shell when needed, or always with ``force``."""
    if os.name == "nt":
        quoted, mark = subprocess.list2cmdline([arg]), '"'
    else:
        quoted, mark = shlex.quote(arg), "'"
    if force and quoted == arg:
        return f"{mark}{arg}{mark}"
    return quoted


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Render a command line that can be pasted into a shell.

    Filter graphs following ``-vf`` or ``-af`` are always quoted.
    """
    rendered = [quote_arg(str(exe))]
    previous = ""
    for arg in map(str, args):
        rendered.append(quote_arg(arg, force=previous in _QUOTED_AFTER))
        previous = arg
    return " ".join(rendered)


def format_ffmpeg_cmd(args: Sequence[str | Path]) -> str:
    """Render an ``ffmpeg`` invocation for display."""
    return join_command(FFMPEG, args)


__all__ = [
    "FFMPEG",
    "FFPROBE",
    "cache_key",
    "check_ffmpeg_version",
    "format_ffmpeg_cmd",
    "get_ffmpeg_version",
    "get_ffprobe_version",
    "join_command",
    "quote_arg",
    "run",
    "run_ffmpeg",
    "run_ffprobe",
]
