import pytest

from codewheel.symbols import SymbolLookupError, SymbolTable, validate_codes


@pytest.fixture
def table():
    return SymbolTable.numbered(rows=4)


def test_numbered_table(table):
    assert len(table) == 96
    assert table.rows == 4
    assert table.lookup(1) == "01"
    assert table.lookup(96) == "96"


def test_lookup_out_of_range_raises(table):
    with pytest.raises(SymbolLookupError) as info:
        table.lookup(97)
    assert info.value.index == 97
    assert info.value.size == 96
    with pytest.raises(SymbolLookupError):
        table.lookup(0)


def test_lookup_error_is_lookup_error(table):
    with pytest.raises(LookupError):
        table.lookup(-3)


def test_get_returns_default(table):
    assert table.get(5) == "05"
    assert table.get(200) is None
    assert table.get(200, "") == ""


def test_cell_addressing(table):
    assert table.cell(0, 0) == "01"
    assert table.cell(2, 12) == "61"
    with pytest.raises(ValueError):
        table.cell(0, 24)


def test_require(table):
    table.require(96)
    with pytest.raises(SymbolLookupError):
        table.require(97)


def test_non_string_code_rejected():
    with pytest.raises(TypeError, match="cell 2"):
        SymbolTable(["A", 2])


def test_sequence_behaviour():
    table = SymbolTable(["A", "B", "C"], columns=3)
    assert list(table) == ["A", "B", "C"]
    assert table[0] == "A"
    assert "SymbolTable" in repr(table)


def test_dict_round_trip(table):
    restored = SymbolTable.from_dict(table.to_dict())
    assert list(restored) == list(table)
    assert restored.columns == 24


def test_validate_codes():
    assert validate_codes(["A", "B"]) == []
    assert validate_codes(["A", "  "]) == ["Cell 2 is blank"]
