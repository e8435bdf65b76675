"""Output sinks for the finished document.

Both sinks receive the complete document once, after assembly.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Protocol, TextIO

import pyperclip

from dumpcode.errors import SinkError

logger = logging.getLogger(__name__)

CLIPBOARD_ATTEMPTS = 3
CLIPBOARD_RETRY_DELAY = 0.05  # seconds
CLIPBOARD_SUCCESS_MESSAGE = "Code dump copied to clipboard"


class Sink(Protocol):
    def write(self, document: str) -> None:
        ...


class StdoutSink:
    """Prints the raw document, nothing else."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write(self, document: str) -> None:
        print(document, file=self.stream or sys.stdout)


class ClipboardSink:
    """Copies the document to the system clipboard, retrying transient failures.

    Up to ``attempts`` tries are made with ``delay`` seconds between them;
    the last failure is raised as ``SinkError``.  On success a confirmation
    line is printed to *stream*.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        attempts: int = CLIPBOARD_ATTEMPTS,
        delay: float = CLIPBOARD_RETRY_DELAY,
        copy: Callable[[str], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.stream = stream
        self.attempts = attempts
        self.delay = delay
        self._copy = copy
        self._sleep = sleep

    def copy(self, text: str) -> None:
        """Copy *text* with retries; raise ``SinkError`` if every attempt fails."""
        copy = self._copy or pyperclip.copy
        for attempt in range(1, self.attempts + 1):
            try:
                copy(text)
                return
            except pyperclip.PyperclipException as exc:
                if attempt == self.attempts:
                    raise SinkError(f"failed to copy output to clipboard: {exc}") from exc
                logger.debug("clipboard attempt %d failed: %s", attempt, exc)
                self._sleep(self.delay)

    def write(self, document: str) -> None:
        self.copy(document)
        print(CLIPBOARD_SUCCESS_MESSAGE, file=self.stream or sys.stdout)
