"""Shared pytest fixtures.

Every test runs in its own working directory with its own cache, and with
FFmpeg tool discovery stubbed out so no native binaries are needed.
"""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

import pytest

from ffedit.models import EditPlan, Options, RuntimeContext

if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in ``tmp_path`` so default ``Output.*`` files land there."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _isolated_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the probe cache out of the shared temp directory."""
    monkeypatch.setattr("ffedit.models.context._CACHE_DIR", tmp_path / ".cache")


@pytest.fixture(autouse=True)
def _no_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Do not attach file handlers to the root logger from CLI tests."""
    monkeypatch.setattr("ffedit.cli.ensure_log_file_handler", lambda: None)


@pytest.fixture(autouse=True)
def _tools_sanity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stub tool version and filter checks to avoid native calls in tests."""
    monkeypatch.setattr("ffedit.tools.cli.check_ffmpeg_version", lambda _ctx: "test", raising=True)
    monkeypatch.setattr("ffedit.tools.probe.check_version", lambda _ctx: "test", raising=True)
    monkeypatch.setattr("ffedit.tools.capabilities.has_rubberband", lambda _ctx: True, raising=True)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Provide a placeholder MP4 source; its content is never decoded."""
    src = tmp_path / "clip.mp4"
    src.write_bytes(b"\x00" * 16)
    return src


@pytest.fixture
def make_plan() -> Callable[..., EditPlan]:
    """Return a factory building a plan from ``Options`` keyword arguments."""

    def _make(**kwargs: object) -> EditPlan:
        return EditPlan.from_options(Options(**kwargs), RuntimeContext())

    return _make


@pytest.fixture
def fake_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], Path]:
    """Return a factory installing a ``/bin/sh`` script under a tool name on ``PATH``."""
    if os.name == "nt":
        pytest.skip("shell scripts stand in for tools on POSIX only")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def _install(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _install
