"""Unit tests for shared utility functions (examplegen.utils).

Tests cover:
- to_camel name helper
- load_json / save_json (key order, formatting, trailing newline)
- remove_files_with_suffix (non-recursive, suffix match only)
- Rich print helpers do not raise
"""

from __future__ import annotations

import json

import pytest

from examplegen.utils import (
    load_json,
    print_banner,
    print_error,
    print_info,
    print_listing,
    print_next_steps,
    print_rule,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
    remove_files_with_suffix,
    save_json,
    to_camel,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


class TestToCamel:
    def test_pascal(self):
        assert to_camel("BlindAuction") == "blindAuction"

    def test_acronym_prefix_lowers_first_char_only(self):
        assert to_camel("FHEAdd") == "fHEAdd"

    def test_empty(self):
        assert to_camel("") == ""


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestJson:
    def test_save_formatting(self, tmp_path):
        path = tmp_path / "out" / "data.json"
        save_json({"b": 1, "a": "é"}, path)
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "b": 1,\n  "a": "é"\n}\n'

    def test_load_preserves_order(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('{"z": 1, "a": 2, "m": 3}')
        assert list(load_json(path)) == ["z", "a", "m"]

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{nope")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestFileHelpers:
    def test_remove_files_with_suffix(self, tmp_path):
        (tmp_path / "A.sol").write_text("a")
        (tmp_path / "B.sol").write_text("b")
        (tmp_path / "notes.md").write_text("keep")
        nested = tmp_path / "interfaces"
        nested.mkdir()
        (nested / "I.sol").write_text("i")

        removed = remove_files_with_suffix(tmp_path, ".sol")

        assert sorted(p.name for p in removed) == ["A.sol", "B.sol"]
        assert (tmp_path / "notes.md").exists()
        assert (nested / "I.sol").exists()

    def test_remove_files_missing_directory(self, tmp_path):
        assert remove_files_with_suffix(tmp_path / "missing", ".ts") == []


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestPrintHelpers:
    def test_helpers_do_not_raise(self, tmp_path):
        print_step(1, "Copying template")
        print_banner("FHEVM example", "Example : fhe-counter")
        print_rule("done")
        print_summary_table({"Contracts": "2"}, title="Summary")
        print_listing("Available examples", [("fhe-counter", "A counter")])
        print_next_steps(tmp_path / "project")
        print_success("ok")
        print_info("info")
        print_warning("careful")
        print_error("bad")

    def test_error_prefix(self, capsys):
        print_error("something broke")
        assert "Error:" in capsys.readouterr().out
