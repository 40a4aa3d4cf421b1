import logging
from typing import Iterator, List, Sequence

from watchsat.encoding import Assignment, WatchList, false_literal
from watchsat.watch import update


logger = logging.getLogger(__name__)


def solve(
    variables: Sequence[str],
    watch_list: WatchList,
    variable: int,
    assignment: Assignment,
) -> Iterator[Assignment]:
    """
    Lazily yields every assignment extending `assignment` from `variable`
    onwards that satisfies the clauses in `watch_list`.

    Variables are tried in index order, 0 before 1, and an assignment is
    abandoned as soon as it makes some clause false. Each model is yielded as a
    copy so the caller can keep it while the search carries on. No models means
    the clauses are unsatisfiable.

    The search is a depth first walk with an explicit stack of the values
    chosen so far rather than recursion, so the number of variables isn't
    bounded by the recursion limit.
    """
    count = len(variables)
    chosen: List[int] = [] # value currently assigned at each depth below `current`
    current = variable
    value = 0
    conflicts = 0

    while True:
        if current == count: # all assigned without conflict
            logger.debug("model found after %d conflicts", conflicts)
            yield list(assignment)
        elif value < 2:
            assignment[current] = value
            if update(watch_list, false_literal(current, value), assignment): # descend
                chosen.append(value)
                current += 1
                value = 0
            else: # try the other value
                conflicts += 1
                value += 1
            continue
        else: # both values failed
            assignment[current] = None

        if not chosen: # backtracked past the starting variable
            logger.debug("search exhausted after %d conflicts", conflicts)
            return
        current -= 1
        value = chosen.pop() + 1


search = solve
