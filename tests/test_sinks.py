"""Tests for the stdout and clipboard sinks."""

from __future__ import annotations

import io

import pyperclip
import pytest

from dumpcode.errors import SinkError
from dumpcode.sinks import (
    CLIPBOARD_RETRY_DELAY,
    CLIPBOARD_SUCCESS_MESSAGE,
    ClipboardSink,
    StdoutSink,
)


class FlakyClipboard:
    """Fails the first *failures* calls, then records the copied text."""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0
        self.copied: str | None = None

    def __call__(self, text: str) -> None:
        self.calls += 1
        if self.calls <= self.failures:
            raise pyperclip.PyperclipException("clipboard busy")
        self.copied = text


def test_stdout_sink_prints_raw_document() -> None:
    out = io.StringIO()
    StdoutSink(out).write("# project structure\n\nproj/\n\n")
    assert out.getvalue() == "# project structure\n\nproj/\n\n\n"


class TestClipboardSink:
    def test_first_attempt(self) -> None:
        clip = FlakyClipboard(failures=0)
        sleeps: list[float] = []
        out = io.StringIO()
        ClipboardSink(out, copy=clip, sleep=sleeps.append).write("doc")

        assert clip.copied == "doc"
        assert clip.calls == 1
        assert sleeps == []
        assert out.getvalue() == CLIPBOARD_SUCCESS_MESSAGE + "\n"

    def test_recovers_on_last_attempt(self) -> None:
        clip = FlakyClipboard(failures=2)
        sleeps: list[float] = []
        ClipboardSink(io.StringIO(), copy=clip, sleep=sleeps.append).write("doc")

        assert clip.copied == "doc"
        assert clip.calls == 3
        assert sleeps == [CLIPBOARD_RETRY_DELAY, CLIPBOARD_RETRY_DELAY]

    def test_gives_up_after_three_attempts(self) -> None:
        clip = FlakyClipboard(failures=10)
        sleeps: list[float] = []
        out = io.StringIO()
        sink = ClipboardSink(out, copy=clip, sleep=sleeps.append)

        with pytest.raises(SinkError, match="clipboard busy"):
            sink.write("doc")

        assert clip.calls == 3
        assert len(sleeps) == 2
        assert out.getvalue() == ""

    def test_delay_is_short(self) -> None:
        assert 0.01 <= CLIPBOARD_RETRY_DELAY < 0.1

    def test_uses_pyperclip_by_default(self, monkeypatch) -> None:
        clip = FlakyClipboard(failures=0)
        monkeypatch.setattr(pyperclip, "copy", clip)
        ClipboardSink(io.StringIO()).copy("text")
        assert clip.copied == "text"
