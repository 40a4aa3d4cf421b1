import argparse
import logging
import sys
import timeit
from os import listdir, path
from typing import List, Optional

from watchsat.check import brute_force
from watchsat.errors import SATError, TooManyVariablesError
from watchsat.instance import SAT
from watchsat.log import LEVELS, init_logger


logger = logging.getLogger("watchsat")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="watchsat", description="Find a satisfying assignment for a CNF formula.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-i", "--input", action="append", default=[], help="DIMACS CNF file, may be repeated")
    source.add_argument("-c", "--clause", action="append", default=[], help='clause such as "A ~B C", may be repeated')
    source.add_argument("-b", "--bench", help="directory of uf*/uuf* benchmark folders of DIMACS files")
    parser.add_argument("-f", "--format", choices=["string", "json"], default="string")
    parser.add_argument("--check", action="store_true", help="cross-check the verdict against brute force")
    parser.add_argument("-l", "--log-level", type=str.upper, choices=LEVELS, default="WARNING")
    return parser.parse_args(argv)


def solve_one(sat: SAT, fmt: str, check: bool) -> int:
    solution = sat.solve()
    if check:
        try:
            expected = brute_force(len(sat.variables), sat.clauses) is not None
        except TooManyVariablesError as e:
            logger.warning("skipping the brute force check: %s", e)
            expected = solution.exists
        if expected != solution.exists:
            logger.error("brute force disagrees: expected %s", "SAT" if expected else "UNSAT")
            return 2
    if not solution:
        print("UNSAT")
        return 1
    print(solution.as_json() if fmt == "json" else solution.as_string())
    return 0


def runall(root: str) -> int:
    """
    Solves every `.cnf` file in the `uf*` (satisfiable) and `uuf*`
    (unsatisfiable) folders under `root` and checks the verdicts.
    """
    failures = 0
    for directory in sorted(listdir(root)):
        if directory.startswith("uuf"):
            expected = False
        elif directory.startswith("uf"):
            expected = True
        else:
            continue

        full_dir = path.join(root, directory)
        names = sorted(n for n in listdir(full_dir) if n.endswith(".cnf"))
        total = 0.0
        for name in names:
            sat = SAT()
            sat.add_dimacs(path.join(full_dir, name))
            total += timeit.timeit(sat.solve, number=1)
            if sat.solve().exists != expected:
                logger.error("wrong verdict for %s/%s", directory, name)
                failures += 1
        if names:
            print(f"{directory}: {len(names)} instances, total {total:.3f}s, average {total / len(names):.3f}s")
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        init_logger(args.log_level)

        if args.bench:
            return runall(args.bench)

        if args.clause:
            sat = SAT()
            sat.add_clause_from_string(*args.clause)
            return solve_one(sat, args.format, args.check)

        status = 0
        for name in args.input:
            sat = SAT()
            sat.add_dimacs(name)
            if len(args.input) > 1:
                print(f"{name}: ", end="")
            status = max(status, solve_one(sat, args.format, args.check))
        if not args.input:
            logger.error("nothing to solve, give --input, --clause or --bench")
            return 2
        return status
    except (SATError, OSError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
