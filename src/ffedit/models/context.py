"""Per-run settings and the on-disk probe cache."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Self

from diskcache import Cache

from ffedit.models.verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Callable

_CACHE_DIR = Path(os.getenv("FFEDIT_CACHE", tempfile.gettempdir())) / "ffedit-cache"


def open_cache() -> Cache:
    """Open the cache shared by tool checks and ffprobe results."""
    return Cache(str(_CACHE_DIR))


@dataclass(slots=True)
class RuntimeContext:
    """Everything a run needs besides its options.

    ``verbosity`` and ``dry_run`` decide what is announced to
    ``status_callback``. ``cache`` persists between runs.
    """

    verbosity: Verbosity = Verbosity.COMMANDS
    dry_run: bool = False
    status_callback: Callable[[str], None] | None = None
    cache: Cache = field(default_factory=open_cache)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the cache's database handle."""
        self.cache.close()


__all__ = ["RuntimeContext", "open_cache"]
