from watchsat.check import brute_force, satisfies
from watchsat.encoding import false_literal, is_false, is_negated, is_true, literal, negate, variable_of
from watchsat.errors import ConfigError, EmptyClauseError, LiteralRangeError, ParseError, SATError, SolvedError, TooManyVariablesError
from watchsat.instance import SAT, NoSolution, Phase, Solution, ValidAssignment
from watchsat.parser import VariableTable, from_dimacs, load_dimacs, parse, parse_many
from watchsat.search import solve
from watchsat.watch import build, create_list, notify_false, update

__version__ = "0.1.0"
