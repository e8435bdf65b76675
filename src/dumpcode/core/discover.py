"""Tree builder and file selector: one sequential walk of the scan root.

The walk renders the tree text and picks the files that go into the dump
in the same pass, so both always agree:

* an entry whose basename is in ``exclude_dirs`` is dropped, and for a
  directory its whole subtree is pruned;
* symlinks are never followed and are reported as skipped;
* directories on another device than the root are not entered;
* within a directory, subdirectories come first, then files, each sorted
  by name;
* once ``max_files`` files are selected the walk stops outright.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from dumpcode.classifiers import fallback_tag
from dumpcode.core.config import ScanConfig
from dumpcode.errors import RootAccessError
from dumpcode.model import EntryKind
from dumpcode.model.entries import ScanResult, SelectedFile, TreeEntry, file_extension

logger = logging.getLogger(__name__)

# How much of an extensionless file is read to look for a shebang/marker.
SNIFF_BYTES = 8192

BRANCH = "├── "
LEAF = "└── "


def _connector(depth: int) -> str:
    return BRANCH if depth == 1 else LEAF


def tree_line(depth: int, label: str) -> str:
    """Render one tree line for an entry at *depth* (root children are 1)."""
    return f"{'  ' * (depth - 1)}{_connector(depth)}{label}"


def root_label(root: Path) -> str:
    """Label for the first tree line: the root's basename plus a slash."""
    resolved = root.resolve()
    if resolved.name:
        return f"{resolved.name}/"
    return resolved.anchor


def _sort_key(entry: os.DirEntry) -> tuple[int, str]:
    try:
        is_dir = entry.is_dir(follow_symlinks=False)
    except OSError:
        is_dir = False
    return (0 if is_dir else 1, entry.name)


def sniff(path: Path, limit: int = SNIFF_BYTES) -> str:
    """Return the first *limit* bytes of *path* as text (undecodable bytes dropped)."""
    with path.open("rb") as fh:
        head = fh.read(limit)
    return head.decode("utf-8", errors="ignore")


class _Walk:
    """Mutable state of one walk; owned by the single walking thread."""

    def __init__(self, cfg: ScanConfig, root: Path, root_dev: int) -> None:
        self.cfg = cfg
        self.root_dev = root_dev
        self.lines: list[str] = [root_label(root)]
        self.files: list[SelectedFile] = []
        self.skipped: list[TreeEntry] = []
        self.halted = False
        self.truncated = False

    # ── helpers ─────────────────────────────────────────────────────

    def _skip(self, rel: str, depth: int, kind: EntryKind, reason: str) -> None:
        self.skipped.append(TreeEntry(path=rel, depth=depth, kind=kind, reason=reason))

    def list_dir(self, path: Path) -> list[os.DirEntry]:
        with os.scandir(path) as it:
            return sorted(it, key=_sort_key)

    # ── traversal ───────────────────────────────────────────────────

    def walk_dir(self, path: Path, rel: str, depth: int) -> None:
        """Visit the children of directory *path* (which sits at *depth*)."""
        try:
            entries = self.list_dir(path)
        except OSError as exc:
            logger.warning("cannot list directory %s: %s", rel or ".", exc)
            self._skip(rel, depth, EntryKind.DIRECTORY, f"unreadable: {exc.strerror or exc}")
            return

        self.visit_children(entries, rel, depth)

    def visit_children(self, entries: list[os.DirEntry], rel: str, depth: int) -> None:
        for entry in entries:
            if self.halted:
                return
            child_rel = f"{rel}/{entry.name}" if rel else entry.name
            self.visit(entry, child_rel, depth + 1)

    def visit(self, entry: os.DirEntry, rel: str, depth: int) -> None:
        cfg = self.cfg

        if entry.name in cfg.exclude_dirs:
            logger.debug("excluded: %s", rel)
            return

        if entry.is_symlink():
            logger.warning("skipping symlink: %s", rel)
            self._skip(rel, depth, EntryKind.SYMLINK, "symlink")
            return

        if len(self.files) >= cfg.max_files:
            self.halted = True
            self.truncated = True
            logger.info("file cap of %d reached; stopping at %s", cfg.max_files, rel)
            return

        try:
            st = entry.stat(follow_symlinks=False)
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = entry.is_file(follow_symlinks=False)
        except OSError as exc:
            logger.warning("cannot stat %s: %s", rel, exc)
            self._skip(rel, depth, EntryKind.FILE, f"unreadable: {exc.strerror or exc}")
            return

        if is_dir:
            if st.st_dev != self.root_dev:
                logger.info("not crossing device boundary: %s", rel)
                self._skip(rel, depth, EntryKind.DIRECTORY, "other device")
                return
            self.lines.append(tree_line(depth, f"{entry.name}/"))
            self.walk_dir(Path(entry.path), rel, depth)
        elif is_file:
            self.consider_file(Path(entry.path), rel, depth, st.st_size)
        else:
            logger.debug("not a regular file: %s", rel)

    def consider_file(self, path: Path, rel: str, depth: int, size: int) -> None:
        cfg = self.cfg
        ext = file_extension(path.name)
        size_kb = size // 1024

        if ext:
            if ext not in cfg.extensions:
                return
        elif not cfg.include_extensionless:
            return

        if size_kb > cfg.max_size_kb:
            logger.debug("too large (%dkb): %s", size_kb, rel)
            return

        if not ext:
            try:
                tag = fallback_tag(ext, sniff(path))
            except OSError as exc:
                logger.warning("cannot read %s: %s", rel, exc)
                self._skip(rel, depth, EntryKind.FILE, f"unreadable: {exc.strerror or exc}")
                return
            if not tag:
                return

        self.files.append(SelectedFile(path=rel, size=size))
        self.lines.append(tree_line(depth, f"{rel} [{size_kb}kb]"))


def scan(cfg: ScanConfig) -> ScanResult:
    """Walk ``cfg.root`` once and return the tree text plus selected files.

    Raises ``RootAccessError`` when the root itself cannot be read; any
    other per-entry failure is logged and skipped.
    """
    root = Path(cfg.root)
    try:
        st = os.stat(root)
    except OSError as exc:
        raise RootAccessError(str(root), exc.strerror or str(exc)) from exc
    if not stat.S_ISDIR(st.st_mode):
        raise RootAccessError(str(root), "not a directory")

    walk = _Walk(cfg, root, st.st_dev)
    try:
        entries = walk.list_dir(root)
    except OSError as exc:
        raise RootAccessError(str(root), exc.strerror or str(exc)) from exc
    walk.visit_children(entries, "", 0)

    logger.debug(
        "scan of %s: %d selected, %d skipped%s",
        root,
        len(walk.files),
        len(walk.skipped),
        " (truncated)" if walk.truncated else "",
    )
    return ScanResult(
        tree_text="\n".join(walk.lines),
        files=tuple(walk.files),
        skipped=tuple(walk.skipped),
        truncated=walk.truncated,
    )
