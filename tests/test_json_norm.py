"""Tests for the canonical JSON normalization layer."""

import json

from dumpcode.utils.json_norm import stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_sorts_nested_keys():
    s = stable_json_dumps({"outer": {"z": 1, "a": [{"y": 0, "b": 0}]}})
    assert s.index('"a"') < s.index('"z"')
    assert s.index('"b"') < s.index('"y"')
    assert json.loads(s) == {"outer": {"z": 1, "a": [{"y": 0, "b": 0}]}}


def test_stable_json_dumps_keeps_non_ascii():
    assert "├──" in stable_json_dumps({"t": "├── a"})
