import logging
from itertools import takewhile
from typing import Dict, Iterable, Iterator, List

from watchsat.encoding import Clause, Variable, literal
from watchsat.errors import ParseError


logger = logging.getLogger(__name__)


class VariableTable:
    """
    Maps variable names to their indices in the order they were first seen.
    One table is threaded through every clause of an instance.
    """

    def __init__(self) -> None:
        self.names: List[str] = []
        self._indices: Dict[str, Variable] = {}

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: str) -> bool:
        return name in self._indices

    def __getitem__(self, name: str) -> Variable:
        return self._indices[name]

    def copy(self) -> "VariableTable":
        table = VariableTable()
        table.names = list(self.names)
        table._indices = dict(self._indices)
        return table

    def index(self, name: str) -> Variable:
        """
        The index of `name`, allocating the next one if it's new.
        """
        if name not in self._indices:
            self._indices[name] = len(self.names)
            self.names.append(name)
        return self._indices[name]


################################################################


def parse(table: VariableTable, line: str) -> Clause:
    """
    Parses a whitespace separated list of literals, each a variable name
    optionally preceded by `~`, into an encoded clause.

    "A B ~C" -> [0, 2, 5]
    """
    clause = []
    for token in line.split():
        negated = token.startswith("~")
        name = token[1:] if negated else token
        if not name or "~" in name:
            raise ParseError(token, line)
        clause.append(literal(table.index(name), negated))
    return clause


def parse_many(table: VariableTable, *lines: str) -> Iterator[Clause]:
    for line in lines:
        yield parse(table, line)


################################################################


def load_dimacs(path: str) -> List[List[int]]:
    """
    Given a file name returns the clause set as a list of lists of signed ints.
    """
    with open(path, 'r') as f:
        raw = [
            l.strip()
            for l in takewhile(
                lambda x: not x.startswith("%"), # some benchmark sets end with a `%` line
                f
            ) if l.strip()
        ]
    for l in raw:
        if l.startswith("p"):
            logger.info("[Parser] %s: %s", path, l)
    lines = [l for l in raw if l[0] not in "cp"] # drop comments and the header

    clauses: List[List[int]] = []
    current: List[int] = []
    for token in " ".join(lines).split(): # clauses may span several lines
        try:
            value = int(token)
        except ValueError:
            raise ParseError(token, path) from None
        if value == 0:
            clauses.append(current)
            current = []
        else:
            current.append(value)
    if current: # last clause without its terminating 0
        clauses.append(current)
    return clauses


def from_dimacs(table: VariableTable, clauses: Iterable[List[int]]) -> List[Clause]:
    """
    Encodes DIMACS clauses, naming each variable by its DIMACS number.
    """
    return [
        [literal(table.index(str(abs(v))), v < 0) for v in clause]
        for clause in clauses
    ]
