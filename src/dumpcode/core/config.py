"""Scan configuration: defaults, comma-list parsing and ``[tool.dumpcode]``."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable, Mapping

import jsonschema

from dumpcode.contracts.load import validate_instance
from dumpcode.errors import ConfigError

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({
    # Systems
    "rs", "go", "c", "cpp", "cc", "cxx", "h", "hpp", "hxx", "cs", "swift",
    # Scripting
    "py", "rb", "php", "pl", "pm", "lua", "ex", "exs", "elm", "hs", "erl",
    "fs", "sh", "bash", "zsh", "fish", "ps1", "bat",
    # Web
    "js", "ts", "jsx", "tsx", "html", "css", "scss", "sass", "less",
    # JVM
    "java", "scala", "kt", "kts", "groovy",
    # Config / data / query
    "json", "toml", "yaml", "yml", "xml", "ini", "conf", "properties",
    "sql", "graphql", "gql", "prisma", "csv",
    # Markup
    "md", "markdown", "rst", "txt", "org", "tex", "rmd",
})

DEFAULT_EXCLUDES: frozenset[str] = frozenset({
    ".git", "node_modules", "target", "dist", "build", "venv", ".venv",
    "__pycache__", ".idea", ".vscode", "bin", "obj", ".mypy_cache", "debug",
    ".fingerprint", ".cache", "bower_components", "coverage", "tmp", "temp",
    ".next", "out", "logs", "release", ".gradle", "gradle", "vendor",
    "packages", "artifacts", "generated", "pods", ".eggs", ".pytest_cache",
    "cmake-build-debug", "cmake-build-release", "CMakeFiles", ".vs",
    ".ipynb_checkpoints",
})

DEFAULT_MAX_SIZE_KB = 100
DEFAULT_MAX_FILES = 1000

# Keys accepted in ``[tool.dumpcode]``; validated by dumpcode_config.schema.json.
CONFIG_SCHEMA = "dumpcode_config.schema.json"


@dataclass(frozen=True)
class ScanConfig:
    """Immutable configuration for one scan + dump."""

    root: Path = field(default_factory=lambda: Path("."))
    extensions: frozenset[str] = DEFAULT_EXTENSIONS
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDES
    max_size_kb: int = DEFAULT_MAX_SIZE_KB
    max_files: int = DEFAULT_MAX_FILES
    include_extensionless: bool = True
    workers: int | None = None

    def __post_init__(self) -> None:
        # Accept any iterable or comma string; store the normalised frozensets.
        object.__setattr__(self, "extensions", parse_extensions(self.extensions))
        object.__setattr__(self, "exclude_dirs", parse_names(self.exclude_dirs))
        if self.max_size_kb < 0:
            raise ConfigError(f"max_size_kb must be >= 0, got {self.max_size_kb}")
        if self.max_files < 0:
            raise ConfigError(f"max_files must be >= 0, got {self.max_files}")
        if self.workers is not None and self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")


def parse_extensions(raw: str | Iterable[str]) -> frozenset[str]:
    """Normalise an extension list: trimmed, lowercased, no leading dot.

    Accepts either a comma-separated string or an iterable of items.
    Empty items are dropped.
    """
    items = raw.split(",") if isinstance(raw, str) else raw
    return frozenset(
        e for e in (item.strip().lstrip(".").lower() for item in items) if e
    )


def parse_names(raw: str | Iterable[str]) -> frozenset[str]:
    """Normalise an excluded-directory list (case is preserved)."""
    items = raw.split(",") if isinstance(raw, str) else raw
    return frozenset(n for n in (item.strip() for item in items) if n)


def workers_from_env() -> int | None:
    """Read ``DUMPCODE_WORKERS`` (unset or ``0`` = executor default)."""
    raw = os.environ.get("DUMPCODE_WORKERS", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"DUMPCODE_WORKERS must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"DUMPCODE_WORKERS must be >= 0, got {value}")
    return value or None


def load_project_table(root: Path) -> dict[str, Any]:
    """Return the ``[tool.dumpcode]`` table of *root*/pyproject.toml.

    Missing file or table gives ``{}``.  Raises ``ConfigError`` on a TOML
    syntax error or a table that fails schema validation.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        return {}
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"{pyproject}: {exc}") from exc

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(f"{pyproject}: 'tool' must be a table")
    table = tool.get("dumpcode", {})
    try:
        validate_instance(table, CONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"{pyproject} [tool.dumpcode]: {exc.message}") from exc
    return table


def apply_table(cfg: ScanConfig, table: Mapping[str, Any]) -> ScanConfig:
    """Return *cfg* with values from a validated ``[tool.dumpcode]`` table."""
    changes: dict[str, Any] = {}
    if "extensions" in table:
        changes["extensions"] = parse_extensions(table["extensions"])
    if "exclude" in table:
        changes["exclude_dirs"] = parse_names(table["exclude"])
    if "max_size" in table:
        changes["max_size_kb"] = table["max_size"]
    if "max_files" in table:
        changes["max_files"] = table["max_files"]
    if "include_extensionless" in table:
        changes["include_extensionless"] = table["include_extensionless"]
    if "workers" in table:
        changes["workers"] = table["workers"]
    return replace(cfg, **changes) if changes else cfg
