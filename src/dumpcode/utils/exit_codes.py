"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success: document written to stdout or the clipboard
  2   Error: unreadable root, invalid configuration, sink failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2
