"""Content sniffing for extensionless files (Dockerfile, env-style props).

Intentionally coarse: any extensionless file mentioning ``FROM `` is
treated as a Dockerfile.
"""

from __future__ import annotations

# Checked in order; first marker found wins.
_MARKERS: tuple[tuple[str, str], ...] = (
    ("FROM ", "dockerfile"),
    ("JAVA_HOME", "properties"),
)


class SpecialFileClassifier:
    id: str = "special_file"

    def try_classify(self, ext: str, content: str) -> str | None:
        if ext:
            return None
        for marker, tag in _MARKERS:
            if marker in content:
                return tag
        return None
