"""Tests for option validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ffedit.models import Container, Options, RuntimeOptions, Verbosity


@pytest.mark.parametrize("extra", [{}, {"speed": 2.0}, {"mute": True}, {"trim_to": "5"}])
@pytest.mark.parametrize("name", ["notes.txt", "missing.mp4", "noext"])
def test_invalid_input_rejected(tmp_path: Path, name: str, extra: dict[str, object]) -> None:
    """Wrong extensions and missing files fail regardless of other options."""
    if name != "missing.mp4":
        (tmp_path / name).write_text("x")
    with pytest.raises(ValidationError):
        Options(input=tmp_path / name, **extra)


def test_wrong_extension_message(tmp_path: Path) -> None:
    src = tmp_path / "notes.txt"
    src.write_text("x")
    with pytest.raises(ValidationError, match="Not a video file"):
        Options(input=src)


@pytest.mark.parametrize(("name", "container"), [("a.MP4", Container.MP4), ("b.mov", Container.MOV)])
def test_extension_is_case_insensitive(tmp_path: Path, name: str, container: Container) -> None:
    src = tmp_path / name
    src.write_bytes(b"\x00")
    assert Options(input=src).container is container


@pytest.mark.parametrize(
    ("value", "expected"),
    [("5", 5.0), ("2.5", 2.5), (2.5, 2.5), (7, 7.0), ("90s", 90.0), ("1m30s", 90.0), ("00:01:30", 90.0)],
)
def test_trim_parsing(source_file: Path, value: str | float, expected: float) -> None:
    opts = Options(input=source_file, trim_start=value, trim_to=value)
    assert opts.trim_start_sec == expected
    assert opts.trim_to_sec == expected


def test_trim_unset_is_none(source_file: Path) -> None:
    opts = Options(input=source_file)
    assert opts.trim_start_sec is None
    assert opts.trim_end_sec is None
    assert opts.trim_to_sec is None


@pytest.mark.parametrize("value", ["-1", -2.0, "inf", "nan", "soon", "1x2y"])
def test_trim_invalid_values_rejected(source_file: Path, value: str | float) -> None:
    with pytest.raises(ValidationError):
        Options(input=source_file, trim_start=value)


def test_trim_to_and_trim_end_conflict(source_file: Path) -> None:
    with pytest.raises(ValidationError, match="trim_to"):
        Options(input=source_file, trim_to="5", trim_end="2")


def test_zero_trim_end_does_not_conflict(source_file: Path) -> None:
    """A zero trim is a no-op, so it cannot conflict with trim-to."""
    opts = Options(input=source_file, trim_to="5", trim_end="0")
    assert opts.trim_to_sec == 5.0


@pytest.mark.parametrize("speed", [0, -1.5])
def test_speed_must_be_positive(source_file: Path, speed: float) -> None:
    with pytest.raises(ValidationError):
        Options(input=source_file, speed=speed)


def test_unknown_field_rejected(source_file: Path) -> None:
    with pytest.raises(ValidationError):
        Options(input=source_file, volume=2)


@pytest.mark.parametrize(
    ("up", "down", "expected"),
    [
        (None, None, ()),
        (2.0, None, (2.0,)),
        (None, 3.0, (-3.0,)),
        (2.0, 3.0, (2.0, -3.0)),
        (0.0, 0.0, ()),
    ],
)
def test_pitch_shifts(
    source_file: Path, up: float | None, down: float | None, expected: tuple[float, ...]
) -> None:
    assert Options(input=source_file, pitch_up=up, pitch_down=down).pitch_shifts == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("quiet", Verbosity.QUIET),
        ("COMMANDS", Verbosity.COMMANDS),
        (2, Verbosity.OUTPUT),
        (Verbosity.OUTPUT, Verbosity.OUTPUT),
    ],
)
def test_verbosity_parsing(value: object, expected: Verbosity) -> None:
    assert RuntimeOptions(verbosity=value).verbosity is expected


def test_runtime_defaults(source_file: Path) -> None:
    opts = Options(input=source_file)
    assert opts.runtime.verbosity is Verbosity.COMMANDS
    assert opts.runtime.dry_run is False
    assert opts.output is None
    assert opts.speed == 1.0
    assert opts.mute is False


@pytest.mark.parametrize("field", ["speed", "pitch_up", "pitch_down"])
@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), "inf", "nan"])
def test_non_finite_numbers_rejected(source_file: Path, field: str, value: float | str) -> None:
    """Speed and pitch must be finite before any filter is built."""
    with pytest.raises(ValidationError):
        Options(input=source_file, **{field: value})
