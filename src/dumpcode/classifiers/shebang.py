"""Shebang sniffing for scripts with no (or an unmapped) extension."""

from __future__ import annotations

import re
from types import MappingProxyType

# ``#!/usr/bin/env NAME`` or ``#!/any/path/NAME``
_SHEBANG_RE = re.compile(r"^#!\s*/usr/bin/env\s+(\w+)|^#!\s*/.*/(\w+)")

INTERPRETERS: MappingProxyType[str, str] = MappingProxyType({
    "python": "python",
    "python3": "python",
    "ruby": "ruby",
    "node": "javascript",
    "nodejs": "javascript",
    "bash": "bash",
    "sh": "bash",
    "perl": "perl",
    "php": "php",
    "lua": "lua",
    "Rscript": "r",
})


def interpreter_name(first_line: str) -> str | None:
    """Return the interpreter named by a shebang line, or None."""
    m = _SHEBANG_RE.match(first_line)
    if m is None:
        return None
    return m.group(1) or m.group(2)


class ShebangClassifier:
    """Maps a ``#!`` interpreter to a tag.

    A shebang always ends the chain: an unknown interpreter gives ``""``
    rather than letting content sniffing guess.
    """

    id: str = "shebang"

    def try_classify(self, ext: str, content: str) -> str | None:
        if not content.startswith("#!"):
            return None
        first_line = content.split("\n", 1)[0].rstrip("\r")
        name = interpreter_name(first_line)
        if name is None:
            return ""
        return INTERPRETERS.get(name, "")
