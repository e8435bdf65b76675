"""Tests for the language classifier chain."""

from __future__ import annotations

import pytest

from dumpcode.classifiers import (
    DEFAULT_CHAIN,
    LANGUAGE_BY_EXTENSION,
    classify,
    fallback_tag,
)
from dumpcode.classifiers.shebang import ShebangClassifier, interpreter_name
from dumpcode.classifiers.special import SpecialFileClassifier


class TestExtensionTable:
    """Primary lookup by lowercase extension."""

    @pytest.mark.parametrize(
        "ext, tag",
        [
            ("rs", "rust"),
            ("py", "python"),
            ("ts", "typescript"),
            ("hpp", "cpp"),
            ("kt", "kotlin"),
            ("yml", "yaml"),
            ("gql", "graphql"),
            ("md", "markdown"),
            ("zsh", "bash"),
        ],
    )
    def test_known_extensions(self, ext: str, tag: str) -> None:
        assert classify(ext, "") == tag

    def test_unknown_extension_is_untagged(self) -> None:
        assert classify("unknownxyz", "whatever") == ""

    def test_table_wins_over_content(self) -> None:
        """A mapped extension is never second-guessed by a shebang."""
        assert classify("py", "#!/usr/bin/env node\n") == "python"

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            LANGUAGE_BY_EXTENSION["new"] = "x"  # type: ignore[index]

    def test_table_covers_common_families(self) -> None:
        assert len(LANGUAGE_BY_EXTENSION) >= 60


class TestShebang:
    """Interpreter sniffing for unmapped or missing extensions."""

    @pytest.mark.parametrize(
        "line, tag",
        [
            ("#!/usr/bin/env node", "javascript"),
            ("#!/usr/bin/env nodejs", "javascript"),
            ("#!/usr/bin/env python3", "python"),
            ("#!/usr/bin/python", "python"),
            ("#!/bin/sh", "bash"),
            ("#!/bin/bash", "bash"),
            ("#!/usr/bin/env ruby", "ruby"),
            ("#!/usr/bin/perl", "perl"),
            ("#!/usr/bin/env php", "php"),
            ("#!/usr/local/bin/lua", "lua"),
            ("#!/usr/bin/env Rscript", "r"),
            ("#! /usr/bin/env python", "python"),
        ],
    )
    def test_known_interpreters(self, line: str, tag: str) -> None:
        assert classify("", line + "\nbody\n") == tag

    def test_unknown_interpreter_is_untagged(self) -> None:
        assert classify("", "#!/usr/bin/env zsh\necho hi\n") == ""

    def test_shebang_applies_to_unmapped_extension(self) -> None:
        assert classify("cgi", "#!/usr/bin/perl\nprint 1;\n") == "perl"

    def test_shebang_stops_the_chain(self) -> None:
        """An unrecognised shebang is not overridden by content markers."""
        assert classify("", "#!/opt/custom\nFROM scratch\n") == ""

    def test_not_a_shebang(self) -> None:
        assert ShebangClassifier().try_classify("", "echo #!/bin/sh") is None

    def test_crlf_first_line(self) -> None:
        assert classify("", "#!/usr/bin/env python3\r\nprint(1)\r\n") == "python"

    def test_interpreter_name(self) -> None:
        assert interpreter_name("#!/usr/bin/env node") == "node"
        assert interpreter_name("#!/usr/bin/python3") == "python3"
        assert interpreter_name("#!python") is None


class TestSpecialFiles:
    """Content markers for extensionless files."""

    def test_dockerfile_marker(self) -> None:
        assert classify("", "FROM ubuntu:22.04\nRUN true\n") == "dockerfile"

    def test_java_home_marker(self) -> None:
        assert classify("", "JAVA_HOME=/opt/jdk\n") == "properties"

    def test_dockerfile_marker_checked_first(self) -> None:
        assert classify("", "JAVA_HOME=/x\nFROM scratch\n") == "dockerfile"

    def test_plain_text_is_untagged(self) -> None:
        assert classify("", "MIT License\n") == ""

    def test_markers_ignored_when_extension_present(self) -> None:
        assert SpecialFileClassifier().try_classify("abc", "FROM scratch") is None
        assert classify("abc", "FROM scratch") == ""


class TestFallbackTag:
    """The content-only chain used to select extensionless files."""

    def test_skips_extension_table(self) -> None:
        assert fallback_tag("py", "print(1)") == ""

    def test_shebang_and_markers(self) -> None:
        assert fallback_tag("", "#!/bin/sh\n") == "bash"
        assert fallback_tag("", "FROM scratch\n") == "dockerfile"
        assert fallback_tag("", "") == ""


def test_chain_order() -> None:
    assert [c.id for c in DEFAULT_CHAIN] == ["extension_table", "shebang", "special_file"]
