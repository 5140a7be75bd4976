"""Container type definitions."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Container(str, Enum):
    """Accepted source container formats."""

    MP4 = "mp4"
    MOV = "mov"

    @property
    def extension(self) -> str:
        """Canonical filename extension for this container, including dot."""
        return f".{self.value}"

    @classmethod
    def from_path(cls, path: str | Path) -> Container:
        """Return the container matching the suffix of ``path``.

        The comparison is case-insensitive, so ``clip.MOV`` is accepted.

        Raises:
            ValueError: If the suffix is missing or not an accepted container.

        """
        suffix = Path(path).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            accepted = ", ".join(c.extension for c in cls)
            raise ValueError(f"Not a video file: {path} (expected one of {accepted})") from None


__all__ = ["Container"]
