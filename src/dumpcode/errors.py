"""Fatal error kinds surfaced to the CLI.

Everything recoverable (unreadable entries, symlinks, undecodable files) is
logged and skipped instead of raised.
"""

from __future__ import annotations


class DumpError(RuntimeError):
    """Base class for errors that abort a dump."""


class RootAccessError(DumpError):
    """Raised when the scan root cannot be opened or listed."""

    def __init__(self, root: str, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"cannot read scan root {root!r}: {reason}")


class SinkError(DumpError):
    """Raised when the finished document cannot be delivered."""


class ConfigError(DumpError):
    """Raised for an invalid ``[tool.dumpcode]`` table or CLI value."""
