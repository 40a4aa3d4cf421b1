import pytest

from watchsat.encoding import false_literal, is_false, is_negated, is_true, literal, negate, variable_of


@pytest.mark.parametrize("variable", [0, 1, 2, 7, 1000])
@pytest.mark.parametrize("negated", [False, True])
def test_literal_round_trip(variable, negated):
    lit = literal(variable, negated)
    assert variable_of(lit) == variable
    assert is_negated(lit) == negated


def test_literal_bits():
    assert literal(0b00, False) == 0b00
    assert literal(0b00, True) == 0b01
    assert literal(0b01, False) == 0b10
    assert literal(0b01, True) == 0b11


def test_negate():
    assert negate(0b10) == 0b11
    assert negate(0b11) == 0b10


def test_unassigned_is_neither_true_nor_false():
    assert not is_false(literal(0, False), [None])
    assert not is_false(literal(0, True), [None])
    assert not is_true(literal(0, False), [None])


def test_truth_follows_negation_bit():
    # a positive literal is false when its variable is 0, a negated one when it is 1
    assert is_false(literal(1, False), [None, 0])
    assert is_true(literal(1, True), [None, 0])
    assert is_false(literal(1, True), [None, 1])
    assert is_true(literal(1, False), [None, 1])


def test_false_literal_matches_assigned_value():
    for value in (0, 1):
        assignment = [None, None, value]
        lit = false_literal(2, value)
        assert variable_of(lit) == 2
        assert is_false(lit, assignment)
        assert is_true(negate(lit), assignment)
