"""Common FFmpeg command arguments."""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Introduce an input file path.
LOGLEVEL_FLAG: tuple[str, ...] = ("-loglevel",)  #: Set FFmpeg's own log level.
LOGLEVEL_ERROR: tuple[str, ...] = (*LOGLEVEL_FLAG, "error")  #: Only report errors.
