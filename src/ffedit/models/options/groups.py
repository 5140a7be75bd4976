"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

SOURCE_GROUP = Group.create_ordered("Source")
OUTPUT_GROUP = Group.create_ordered("Output")
SPEED_GROUP = Group.create_ordered("Speed")
PITCH_GROUP = Group.create_ordered("Pitch")
TRIM_GROUP = Group.create_ordered("Trim")
AUDIO_GROUP = Group.create_ordered("Audio")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "AUDIO_GROUP",
    "OUTPUT_GROUP",
    "PITCH_GROUP",
    "RUNTIME_GROUP",
    "SOURCE_GROUP",
    "SPEED_GROUP",
    "TRIM_GROUP",
]
