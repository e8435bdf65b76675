"""Enums shared across the walker and assembler layers."""

from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    """Kind of filesystem entry met during the walk."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
