"""Tests for symbol tables."""

import pytest
from pydantic import ValidationError

from namegen.core.symbols import DEFAULT_SYMBOLS, RESERVED_CHARACTERS, SymbolCategory, SymbolTable


class TestDefaultSymbols:
    def test_has_every_category(self) -> None:
        assert len(DEFAULT_SYMBOLS) == len(SymbolCategory) == 11
        for category in SymbolCategory:
            assert category.symbol in DEFAULT_SYMBOLS

    def test_lookup_preserves_order(self) -> None:
        assert DEFAULT_SYMBOLS.lookup("v") == ("a", "e", "i", "o", "u", "y")

    def test_lookup_miss(self) -> None:
        assert DEFAULT_SYMBOLS.lookup("x") is None
        assert "x" not in DEFAULT_SYMBOLS

    def test_no_reserved_symbols(self) -> None:
        assert not DEFAULT_SYMBOLS.symbols & RESERVED_CHARACTERS


class TestSymbolTable:
    def test_extend_returns_new_table(self) -> None:
        extended = DEFAULT_SYMBOLS.extend({"x": ["ex", "ix"]})
        assert extended.lookup("x") == ("ex", "ix")
        assert extended.lookup("v") == DEFAULT_SYMBOLS.lookup("v")
        assert "x" not in DEFAULT_SYMBOLS

    def test_extend_replaces_existing(self) -> None:
        extended = DEFAULT_SYMBOLS.extend({"v": ("a",)})
        assert extended.lookup("v") == ("a",)
        assert DEFAULT_SYMBOLS.lookup("v") != ("a",)

    def test_rejects_multi_character_symbols(self) -> None:
        with pytest.raises(ValidationError):
            SymbolTable(entries={"ab": ("x",)})

    @pytest.mark.parametrize("symbol", sorted(RESERVED_CHARACTERS))
    def test_rejects_reserved_symbols(self, symbol: str) -> None:
        with pytest.raises(ValidationError):
            SymbolTable(entries={symbol: ("x",)})

    def test_extend_validates(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_SYMBOLS.extend({"|": ["bar"]})

    def test_is_frozen(self) -> None:
        table = SymbolTable(entries={"x": ("a",)})
        with pytest.raises(ValidationError):
            table.entries = {}  # type: ignore[misc]

    def test_entries_are_read_only(self) -> None:
        source = {"x": ("a",)}
        table = SymbolTable(entries=source)
        with pytest.raises(TypeError):
            table.entries["x"] = ("zzz",)  # type: ignore[index]
        source["x"] = ("zzz",)
        assert table.lookup("x") == ("a",)

    def test_default_symbols_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_SYMBOLS.entries["s"] = ("zzz",)  # type: ignore[index]
        assert "zzz" not in DEFAULT_SYMBOLS.lookup("s")

    def test_empty_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SymbolTable().entries["x"] = ("a",)  # type: ignore[index]

    def test_from_json(self) -> None:
        table = SymbolTable.from_json('{"x": ["foo", "bar"], "y": []}')
        assert table.lookup("x") == ("foo", "bar")
        assert table.lookup("y") == ()

    def test_from_json_invalid(self) -> None:
        with pytest.raises(ValidationError):
            SymbolTable.from_json('{"<": ["foo"]}')
        with pytest.raises(ValidationError):
            SymbolTable.from_json("not json")
