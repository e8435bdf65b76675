"""Walk entries and the scan result handed to the assembler."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from . import EntryKind


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A directory, file or symlink encountered during the walk."""

    path: str                  # POSIX, relative to the scan root
    depth: int
    kind: EntryKind
    size: int | None = None    # bytes; files only
    reason: str = ""           # why the entry was skipped, if it was

    def to_dict(self) -> dict:
        d: dict = {"path": self.path, "depth": self.depth, "kind": self.kind.value}
        if self.size is not None:
            d["size"] = self.size
        if self.reason:
            d["reason"] = self.reason
        return d


@dataclass(frozen=True, slots=True)
class SelectedFile:
    """A file chosen for the dump.

    The extension is derived from ``path`` so it never disagrees with it.
    """

    path: str
    size: int

    @property
    def extension(self) -> str:
        return file_extension(PurePosixPath(self.path).name)

    @property
    def size_kb(self) -> int:
        return self.size // 1024


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Output of one walk: the rendered tree plus the ordered selection."""

    tree_text: str
    files: tuple[SelectedFile, ...] = ()
    skipped: tuple[TreeEntry, ...] = ()
    truncated: bool = False

    def __iter__(self):
        # Allows ``tree_text, files = scan(cfg)``.
        yield self.tree_text
        yield list(self.files)


def file_extension(name: str) -> str:
    """Return the lowercase extension of *name* without the dot.

    ``Makefile`` and ``.env`` have no extension; ``a.tar.GZ`` gives ``gz``.
    """
    return PurePosixPath(name).suffix[1:].lower()
