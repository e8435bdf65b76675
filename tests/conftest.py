"""Shared fixtures: build small project trees on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import pytest


def write_tree(root: Path, files: Mapping[str, str | bytes]) -> Path:
    """Create *files* (POSIX relative path -> content) under *root*.

    A path ending in ``/`` creates an empty directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = root / rel
        if rel.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_bytes(content.encode("utf-8"))
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Mapping[str, str | bytes]], Path]:
    """Return a factory that builds a project under ``tmp_path/proj``."""

    def _make(files: Mapping[str, str | bytes]) -> Path:
        return write_tree(tmp_path / "proj", files)

    return _make


@pytest.fixture
def symlinks_supported(tmp_path: Path) -> None:
    link = tmp_path / "_link"
    try:
        link.symlink_to(tmp_path)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported on this platform")
    link.unlink()
