"""Runner — reads selected files, classifies them and assembles the dump."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from dumpcode.classifiers import classify
from dumpcode.core.config import ScanConfig, workers_from_env
from dumpcode.core.discover import scan
from dumpcode.model.entries import SelectedFile

_logger = logging.getLogger(__name__)

STRUCTURE_HEADER = "# project structure\n\n"


def format_block(rel_path: str, tag: str, content: str) -> str:
    """Render one file's section of the dump."""
    return f"# file: {rel_path}\n\n```{tag}\n{content}\n```\n\n"


def read_selected(root: Path, selected: SelectedFile) -> str | None:
    """Return the text of a selected file.

    Returns ``None`` (after a warning) when the file vanished, became
    unreadable or is not valid UTF-8.
    """
    full_path = root / selected.path
    try:
        raw = full_path.read_bytes()
    except OSError as exc:
        _logger.warning("file skipped, cannot read %s: %s", selected.path, exc)
        return None

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        _logger.warning("non-utf8 file skipped: %s (%s)", selected.path, exc)
        return None
    return content


def render_file(root: Path, selected: SelectedFile) -> str | None:
    """Read, classify and format one selected file.

    Returns ``None`` when the file cannot be read as text; the caller drops
    it from the dump.
    """
    started = time.perf_counter()
    content = read_selected(root, selected)
    if content is None:
        return None

    tag = classify(selected.extension, content)
    _logger.debug(
        "processed %s in %.1fms", selected.path, (time.perf_counter() - started) * 1000
    )
    return format_block(selected.path, tag, content)


def assemble(
    tree_text: str,
    selected_files: Sequence[SelectedFile],
    root: Path,
    *,
    workers: int | None = None,
) -> str:
    """Concatenate the tree and every readable file's block.

    Files are read on a thread pool; blocks are placed by selection index so
    the output order never depends on completion order.
    """
    root = Path(root)
    blocks: list[str | None] = [None] * len(selected_files)

    if selected_files:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(render_file, root, selected) for selected in selected_files
            ]
            for index, future in enumerate(futures):
                blocks[index] = future.result()

    parts = [STRUCTURE_HEADER, tree_text, "\n\n"]
    parts.extend(block for block in blocks if block is not None)
    return "".join(parts)


def generate_dump(cfg: ScanConfig) -> str:
    """Scan ``cfg.root`` and return the full dump document.

    Raises ``RootAccessError`` if the root cannot be read.
    """
    result = scan(cfg)
    workers = cfg.workers if cfg.workers is not None else workers_from_env()
    return assemble(result.tree_text, result.files, Path(cfg.root), workers=workers)
