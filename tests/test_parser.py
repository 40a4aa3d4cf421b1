import os

import pytest

from watchsat.errors import ParseError
from watchsat.parser import VariableTable, from_dimacs, load_dimacs, parse, parse_many


DATA = os.path.join(os.path.dirname(__file__), "data")


def test_encoding_clauses():
    table = VariableTable()
    assert parse(table, "A B ~C") == [0, 2, 5]
    assert parse(VariableTable(), "A B C") == [0, 2, 4]


def test_same_text_same_clause():
    assert parse(VariableTable(), "A B ~C") == parse(VariableTable(), "A B ~C")
    assert parse(VariableTable(), "A B C") != parse(VariableTable(), "A B ~C")


def test_table_is_shared_between_clauses():
    table = VariableTable()
    clauses = list(parse_many(table, "A B", "~B C", "~A"))

    assert clauses == [[0, 2], [3, 4], [1]]
    assert table.names == ["A", "B", "C"]
    assert table["C"] == 2
    assert "B" in table
    assert len(table) == 3


def test_names_can_be_longer_than_one_character():
    table = VariableTable()
    assert parse(table, "rain  ~wet\tsun") == [0, 3, 4]
    assert table.names == ["rain", "wet", "sun"]


def test_blank_line_is_empty_clause():
    assert parse(VariableTable(), "   ") == []


@pytest.mark.parametrize("line", ["A ~", "~~A", "A~B"])
def test_bad_literals(line):
    with pytest.raises(ParseError):
        parse(VariableTable(), line)


def test_load_dimacs():
    assert load_dimacs(os.path.join(DATA, "sat.cnf")) == [[1, 2], [-1, 3], [-1], [-2, 3]]


def test_load_dimacs_stops_at_percent():
    assert load_dimacs(os.path.join(DATA, "unsat.cnf")) == [[1, 2], [-1, 2], [1, -2], [-1, -2]]


def test_load_dimacs_rejects_garbage(tmp_path):
    bad = tmp_path / "bad.cnf"
    bad.write_text("p cnf 1 1\n1 x 0\n")
    with pytest.raises(ParseError):
        load_dimacs(str(bad))


def test_from_dimacs_names_by_number():
    table = VariableTable()
    assert from_dimacs(table, [[3, -1], [1]]) == [[0, 3], [2]]
    assert table.names == ["3", "1"]
