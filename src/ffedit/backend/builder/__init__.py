"""FFmpeg argument builders."""

from .command_builder import build_command

__all__ = ["build_command"]
