"""Stream argument helpers."""


def codec_flag(kind: str) -> tuple[str, ...]:
    """Return codec flag for a stream type (e.g. "v", "a")."""
    return (f"-c:{kind}",)


def copy_stream(kind: str) -> tuple[str, ...]:
    """Return stream copy flags for a stream type."""
    return (*codec_flag(kind), "copy")


def filter_flag(kind: str) -> tuple[str, ...]:
    """Return the simple filter graph flag for a stream type."""
    return (f"-{kind}f",)


def disable_stream(kind: str) -> tuple[str, ...]:
    """Return flag to disable all streams of a type."""
    return (f"-{kind}n",)
