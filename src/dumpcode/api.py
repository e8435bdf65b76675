"""
dumpcode.api
============

Programmatic entrypoints for building project dumps without the CLI.

Goals:
  - No argparse / clipboard dependencies
  - Same defaults and ``[tool.dumpcode]`` handling as the CLI
  - Stable, JSON-friendly manifest output

Usage::

    from dumpcode.api import load_config, dump_project, build_manifest

    cfg = load_config(".", max_files=200)
    text = dump_project(cfg)
    manifest = build_manifest(cfg)
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from dumpcode.classifiers import classify
from dumpcode.contracts.load import validate_instance
from dumpcode.core.config import ScanConfig, apply_table, load_project_table
from dumpcode.core.discover import scan
from dumpcode.core.runner import generate_dump, read_selected
from dumpcode.model import EntryKind
from dumpcode.model.entries import TreeEntry

MANIFEST_SCHEMA = "dump_manifest.schema.json"


def load_config(root: str | Path = ".", **overrides: Any) -> ScanConfig:
    """Build a ``ScanConfig`` for *root*.

    Precedence, lowest first: built-in defaults, the ``[tool.dumpcode]``
    table of *root*/pyproject.toml, then *overrides* (``ScanConfig`` field
    names; ``None`` values are ignored).

    Raises ``ConfigError`` for an invalid table or override.
    """
    root_p = Path(root)
    cfg = apply_table(ScanConfig(root=root_p), load_project_table(root_p))
    explicit = {k: v for k, v in overrides.items() if v is not None}
    return replace(cfg, **explicit) if explicit else cfg


def dump_project(cfg: ScanConfig) -> str:
    """Return the full dump document for *cfg*."""
    return generate_dump(cfg)


def build_manifest(cfg: ScanConfig) -> dict[str, Any]:
    """Describe what a dump of *cfg* would contain, without file contents.

    Returns a ``dump_manifest_v1`` dict: selected files with size and tag,
    skipped entries, and whether the file cap truncated the walk.  Files the
    dump would drop (unreadable, not UTF-8) are listed under ``skipped``.
    """
    root = Path(cfg.root)
    result = scan(cfg)

    files: list[dict[str, Any]] = []
    skipped = list(result.skipped)
    for selected in result.files:
        content = read_selected(root, selected)
        if content is None:
            skipped.append(
                TreeEntry(
                    path=selected.path,
                    depth=selected.path.count("/") + 1,
                    kind=EntryKind.FILE,
                    size=selected.size,
                    reason="not readable as utf-8 text",
                )
            )
            continue
        files.append(
            {
                "path": selected.path,
                "size": selected.size,
                "size_kb": selected.size_kb,
                "tag": classify(selected.extension, content),
            }
        )

    manifest = {
        "schema_version": "dump_manifest_v1",
        "root": root.as_posix(),
        "config": {
            "extensions": sorted(cfg.extensions),
            "exclude": sorted(cfg.exclude_dirs),
            "max_size_kb": cfg.max_size_kb,
            "max_files": cfg.max_files,
            "include_extensionless": cfg.include_extensionless,
        },
        "files": files,
        "skipped": [entry.to_dict() for entry in skipped],
        "truncated": result.truncated,
    }
    validate_instance(manifest, MANIFEST_SCHEMA)
    return manifest
