"""The extension table, first in the classifier chain."""

from __future__ import annotations

from types import MappingProxyType

LANGUAGE_BY_EXTENSION: MappingProxyType[str, str] = MappingProxyType({
    # Systems
    "rs": "rust",
    "go": "go",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "hxx": "cpp",
    "cs": "csharp",
    "swift": "swift",
    # Web
    "js": "javascript",
    "ts": "typescript",
    "jsx": "jsx",
    "tsx": "tsx",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "sass": "scss",
    "less": "less",
    # JVM
    "java": "java",
    "kt": "kotlin",
    "kts": "kotlin",
    "scala": "scala",
    "groovy": "groovy",
    # Scripting
    "py": "python",
    "rb": "ruby",
    "php": "php",
    "pl": "perl",
    "pm": "perl",
    "lua": "lua",
    "r": "r",
    "ex": "elixir",
    "exs": "elixir",
    "elm": "elm",
    "hs": "haskell",
    "erl": "erlang",
    "fs": "fsharp",
    "sh": "bash",
    "bash": "bash",
    "zsh": "bash",
    "fish": "fish",
    "ps1": "powershell",
    "bat": "batch",
    # Config / data
    "json": "json",
    "toml": "toml",
    "yaml": "yaml",
    "yml": "yaml",
    "xml": "xml",
    "ini": "ini",
    "conf": "conf",
    "properties": "properties",
    "csv": "csv",
    # Query
    "sql": "sql",
    "graphql": "graphql",
    "gql": "graphql",
    "prisma": "prisma",
    # Markup
    "md": "markdown",
    "markdown": "markdown",
    "rmd": "markdown",
    "rst": "rst",
    "tex": "latex",
    "txt": "text",
    "org": "org",
})


class ExtensionTableClassifier:
    """Looks the extension up in :data:`LANGUAGE_BY_EXTENSION`."""

    id: str = "extension_table"

    def __init__(self, table: MappingProxyType[str, str] = LANGUAGE_BY_EXTENSION):
        self.table = table

    def try_classify(self, ext: str, content: str) -> str | None:
        return self.table.get(ext)
