import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Sequence

from watchsat.encoding import Assignment, Clause
from watchsat.errors import EmptyClauseError, LiteralRangeError, SolvedError
from watchsat.parser import VariableTable, from_dimacs, load_dimacs, parse
from watchsat.search import solve
from watchsat.watch import create_list


logger = logging.getLogger(__name__)


class Phase(Enum):
    ACCEPTING = "accepting"
    SOLVED = "solved"


class Solution(ABC):
    """
    The outcome of `SAT.solve`, either a `ValidAssignment` or `NoSolution`.
    """
    assignment: Optional[Assignment]
    exists: bool

    def __bool__(self) -> bool:
        return self.exists

    @abstractmethod
    def as_object(self) -> Optional[Dict[str, int]]:
        pass

    @abstractmethod
    def as_json(self) -> str:
        pass

    @abstractmethod
    def as_string(self) -> str:
        pass


class ValidAssignment(Solution):
    exists = True

    def __init__(self, assignment: Assignment, variables: Sequence[str]):
        self.assignment = assignment
        self._variables = variables

    def as_object(self) -> Dict[str, int]:
        return dict(zip(self._variables, self.assignment))

    def as_json(self) -> str:
        return json.dumps(self.as_object(), separators=(",", ":"))

    def as_string(self) -> str:
        """
        {A = 1, B = 0, C = 0}
        """
        return "{" + ", ".join(f"{name} = {value}" for name, value in self.as_object().items()) + "}"

    def __repr__(self) -> str:
        return f"ValidAssignment({self.as_string()})"


class NoSolution(Solution):
    assignment = None
    exists = False

    def as_object(self) -> None:
        return None

    def as_json(self) -> str:
        return ""

    def as_string(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "NoSolution()"


################################################################


class SAT:
    """
    Collects clauses and solves them once.

    Clauses can be added until `solve` is first called, after which the
    instance is solved and the result is returned on every later call.
    """

    def __init__(self) -> None:
        self._table = VariableTable()
        self._clauses: List[Clause] = []
        self._solution: Optional[Solution] = None
        self.phase = Phase.ACCEPTING

    @property
    def variables(self) -> List[str]:
        return list(self._table.names)

    @property
    def clauses(self) -> List[Clause]:
        return list(self._clauses)

    def add_clause_from_string(self, *lines: str) -> None:
        """
        Adds clauses written as space separated literals, e.g. "A ~B C".
        """
        self._check_accepting()
        table = self._table.copy() # only kept if every line is accepted
        self._commit(table, [parse(table, line) for line in lines])

    def add_dimacs(self, path: str) -> None:
        self._check_accepting()
        table = self._table.copy()
        self._commit(table, from_dimacs(table, load_dimacs(path)))

    def add_clause(self, *clauses: Clause) -> None:
        """
        Adds already encoded clauses. Their variables must have come from this
        instance's table, i.e. been added through one of the other methods
        first.
        """
        self._check_accepting()
        self._commit(self._table, clauses)

    def _commit(self, table: VariableTable, clauses: Sequence[Clause]) -> None:
        """
        Checks every clause against `table` and only then adopts both, so a
        rejected batch leaves the instance untouched.
        """
        limit = 2 * len(table)
        for clause in clauses:
            if len(clause) == 0:
                raise EmptyClauseError("cannot add an empty clause")
            for lit in clause:
                if not 0 <= lit < limit:
                    raise LiteralRangeError(lit, len(table))

        self._table = table
        self._clauses.extend(list(clause) for clause in clauses)

    def _check_accepting(self) -> None:
        if self.phase is Phase.SOLVED:
            raise SolvedError("Solution found: cannot add new clauses.")

    def solve(self) -> Solution:
        """
        Finds an assignment satisfying all the clauses, or `NoSolution`.
        """
        if self._solution is None:
            variables = self._table.names
            logger.info("solving %d clauses over %d variables", len(self._clauses), len(variables))

            watch_list = create_list(len(variables), self._clauses)
            initial: Assignment = [None] * len(variables)

            model = next(solve(variables, watch_list, 0, initial), None)
            self._solution = NoSolution() if model is None else ValidAssignment(model, list(variables))
            self.phase = Phase.SOLVED

            logger.info("%s", "satisfiable" if self._solution else "unsatisfiable")

        return self._solution

    def has_solution(self) -> bool:
        """
        Whether `solve` has already run, whatever its result.
        """
        return self.phase is Phase.SOLVED
