"""Tests for the command-line runtime."""

import json

import pytest

from namegen.runtime.__main__ import build_parser, load_symbols, run
from namegen.core.symbols import DEFAULT_SYMBOLS


class TestRun:
    def test_renders_literal_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["(ab)"]) == 0
        assert capsys.readouterr().out == "ab\n"

    def test_renders_requested_number(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["sV'i", "-n", "5", "--seed", "1"]) == 0
        names = capsys.readouterr().out.splitlines()
        assert len(names) == 5
        assert all("'" in name for name in names)

    def test_seed_is_reproducible(self, capsys: pytest.CaptureFixture[str]) -> None:
        run(["!BVC", "-n", "10", "--seed", "99"])
        first = capsys.readouterr().out
        run(["!BVC", "-n", "10", "--seed", "99"])
        assert capsys.readouterr().out == first

    def test_stats(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["(a|bc|)", "--stats"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "combinations: 3",
            "min_length: 0",
            "max_length: 2",
        ]

    def test_enumerate(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["(a|b)(x|y)", "--enumerate"]) == 0
        assert capsys.readouterr().out.splitlines() == ["ax", "ay", "bx", "by"]

    def test_invalid_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["<ab)"]) == 2
        assert capsys.readouterr().out == ""

    def test_extra_symbols(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "symbols.json"
        path.write_text(json.dumps({"x": ["zork"]}))
        assert run(["!x", "--symbols", str(path)]) == 0
        assert capsys.readouterr().out == "Zork\n"

    def test_invalid_symbols_file(self, tmp_path) -> None:
        path = tmp_path / "symbols.json"
        path.write_text(json.dumps({"<": ["nope"]}))
        assert run(["s", "--symbols", str(path)]) == 2

    def test_missing_symbols_file(self, tmp_path) -> None:
        assert run(["s", "--symbols", str(tmp_path / "missing.json")]) == 2


class TestHelpers:
    def test_load_symbols_defaults(self) -> None:
        assert load_symbols(None) is DEFAULT_SYMBOLS

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args(["sV"])
        assert args.pattern == "sV"
        assert args.number == 1
        assert args.seed is None
        assert not args.stats
        assert not args.enumerate
