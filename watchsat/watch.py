"""
Each clause watches exactly one of its literals, starting with its first. A
clause only needs looking at again once its watched literal becomes false, at
which point it either finds another literal that isn't false to watch or the
whole clause is false.

Backtracking only ever unassigns variables and an unassigned literal is never
false, so watches moved by a successful update stay valid after backtracking.
A failed update is rolled back so the search never sees a half finished one.
"""
import logging
from typing import List

from watchsat.encoding import Assignment, Clause, Literal, WatchList


logger = logging.getLogger(__name__)


################################################################


def create_list(variable_count: int, clauses: List[Clause]) -> WatchList:
    """
    Creates a list whose indexes are literals and elements are the lists of
    clauses currently watching that literal.
    """
    watch_list: WatchList = [[] for _ in range(2 * variable_count)]

    for clause in clauses:
        watch_list[clause[0]].append(clause)

    logger.debug("watching %d clauses over %d literals", len(clauses), len(watch_list))
    return watch_list


def update(watch_list: WatchList, false_literal: Literal, assignment: Assignment) -> bool:
    """
    Moves every clause watching `false_literal` onto a literal that isn't
    false under `assignment`. Returns False if some clause has none left, in
    which case `watch_list` is left as it was before the call.
    """
    moved: List[Literal] = [] # slots appended to, in order

    for clause in list(watch_list[false_literal]): # the slot is emptied below
        for alt in clause:
            if alt == false_literal:
                continue
            value = assignment[alt >> 1]
            if value is None or value != alt & 1: # unassigned or true
                watch_list[alt].append(clause)
                moved.append(alt)
                break
        else: # every literal is false
            for alt in reversed(moved):
                watch_list[alt].pop()
            return False

    watch_list[false_literal] = []
    return True


build = create_list
notify_false = update
