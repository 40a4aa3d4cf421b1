from typing import Iterable, List, Optional

import numpy as np

from watchsat.encoding import Assignment, Clause, is_true
from watchsat.errors import TooManyVariablesError


MAX_BRUTE_FORCE_VARIABLES = 20 # a 2^20 row truth table


def satisfies(clauses: Iterable[Clause], assignment: Assignment) -> bool:
    """
    True if every clause has at least one literal that's true under `assignment`.
    """
    return all(
        any(is_true(lit, assignment) for lit in clause)
        for clause in clauses
    )


def brute_force(variable_count: int, clauses: List[Clause]) -> Optional[Assignment]:
    """
    Walks the whole truth table, counting up in binary with variable 0 as the
    least significant bit, and returns the first row satisfying every clause.
    Refuses more than MAX_BRUTE_FORCE_VARIABLES variables.
    """
    if variable_count > MAX_BRUTE_FORCE_VARIABLES:
        raise TooManyVariablesError(variable_count, MAX_BRUTE_FORCE_VARIABLES)
    if variable_count == 0:
        return None if clauses else [] # only empty clauses are possible

    rows = np.arange(2 ** variable_count)[:, None] # one row per assignment
    table = (rows >> np.arange(variable_count)) & 1 # table[row, var] is its value

    satisfied = np.ones(len(rows), dtype=bool)
    for clause in clauses:
        lits = np.array(clause, dtype=int)
        # a literal is true when its variable's value differs from its negation bit
        satisfied &= (table[:, lits >> 1] != (lits & 1)).any(axis=1)

    models = satisfied.nonzero()[0]
    if len(models) == 0:
        return None
    return [int(v) for v in table[models[0]]]
