"""Tests for running external tools."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

from ffedit.tools.cli import _forward_lines, run, run_ffmpeg

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

PROGRESS_THEN_FAIL = r"""printf 'frame=1\rframe=2\rbad filter: setpts\n' >&2
printf 'tail-no-newline' >&2
exit 3"""


@pytest.mark.parametrize(
    ("chunks", "lines", "rest"),
    [
        (["a\nb\n"], ["a", "b"], ""),
        (["frame=1\rframe=2\r", "done\n"], ["frame=1\r", "frame=2\r", "done"], ""),
        (["win\r\nline\r\n"], ["win", "line"], ""),
        (["split\r", "\nnext"], ["split"], "next"),
        (["partial"], [], "partial"),
    ],
)
def test_forward_lines(chunks: list[str], lines: list[str], rest: str) -> None:
    """Bare carriage returns are kept, other line breaks are dropped."""
    seen: list[str] = []
    buf = ""
    for chunk in chunks:
        buf = _forward_lines(chunk, buf, seen.append)
    assert seen == lines
    assert buf == rest


def test_streamed_failure_keeps_output(fake_tool: Callable[[str, str], Path]) -> None:
    """A failing tool streams each line and reports its whole output."""
    fake_tool("ffmpeg", PROGRESS_THEN_FAIL)
    seen: list[str] = []
    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        run_ffmpeg(["-i", "clip.mp4"], verbose=True, status_callback=seen.append)
    assert seen == ["frame=1\r", "frame=2\r", "bad filter: setpts", "tail-no-newline"]
    assert excinfo.value.returncode == 3
    assert excinfo.value.stdout == "frame=1\nframe=2\nbad filter: setpts\ntail-no-newline"


def test_streamed_success_returns_output(fake_tool: Callable[[str, str], Path]) -> None:
    fake_tool("ffmpeg", "echo ok; echo fine >&2")
    seen: list[str] = []
    assert run_ffmpeg([], verbose=True, status_callback=seen.append) == "ok\nfine\n"
    assert seen == ["ok", "fine"]


@pytest.mark.parametrize("verbose", [False, True])
def test_undecodable_output_is_replaced(fake_tool: Callable[[str, str], Path], verbose: bool) -> None:
    """Bytes outside the locale encoding never abort the run."""
    script = fake_tool("noisy", r"printf 'name \377\376 bad\n' >&2; exit 1")
    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        run(script, [], verbose=verbose, status_callback=lambda _m: None)
    out = excinfo.value.stdout
    assert out.startswith("name ")
    assert out.rstrip().endswith(" bad")
