"""
Literals are variables shifted left by one, with the low bit set when the
literal is negated. For the clause `A ~B C` with A -> 0, B -> 1, C -> 2 the
encoded clause is `[0, 3, 4]`.
"""
from typing import List, Optional


Variable = int
Literal = int
Clause = List[Literal]
Value = Optional[int] # 0, 1 or None when unassigned
Assignment = List[Value]
WatchList = List[List[Clause]]


################################################################


def literal(variable: Variable, negated: bool) -> Literal:
    return variable << 1 | (1 if negated else 0)


def variable_of(lit: Literal) -> Variable:
    return lit >> 1


def is_negated(lit: Literal) -> bool:
    return lit & 1 != 0


def negate(lit: Literal) -> Literal:
    return lit ^ 1


def false_literal(variable: Variable, value: int) -> Literal:
    """
    The literal made false by assigning `value` to `variable`. Assigning 0
    falsifies the positive literal, assigning 1 the negated one, so the
    negation bit is the value itself.
    """
    return variable << 1 | value


################################################################


def is_false(lit: Literal, assignment: Assignment) -> bool:
    """
    Unassigned literals are never false.
    """
    value = assignment[lit >> 1]
    return value is not None and value == lit & 1


def is_true(lit: Literal, assignment: Assignment) -> bool:
    value = assignment[lit >> 1]
    return value is not None and value != lit & 1
