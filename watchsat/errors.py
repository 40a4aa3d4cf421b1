class SATError(Exception):
    """
    Base class for everything raised on purpose by this package.
    """
    pass


class ParseError(SATError, ValueError):
    def __init__(self, token: str, line: str):
        super().__init__(f"bad literal {token!r} in clause {line!r}")
        self.token = token
        self.line = line


class EmptyClauseError(SATError, ValueError):
    """
    An empty clause can never be satisfied, the engine doesn't accept one.
    """
    pass


class LiteralRangeError(SATError, IndexError):
    def __init__(self, lit: int, variable_count: int):
        super().__init__(f"literal {lit} is out of range for {variable_count} variables")
        self.literal = lit
        self.variable_count = variable_count


class SolvedError(SATError, RuntimeError):
    """
    Raised when adding clauses to an instance that has already been solved.
    """
    pass


class TooManyVariablesError(SATError, ValueError):
    def __init__(self, variable_count: int, limit: int):
        super().__init__(f"{variable_count} variables is too many to brute force, the limit is {limit}")
        self.variable_count = variable_count
        self.limit = limit


class ConfigError(SATError, ValueError):
    pass
