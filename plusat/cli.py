"""Command line entry point: solve a DIMACS CNF file."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

from .discovery import DEFAULT_HOOKS_NAME, HookLoadError, load_hooks
from .dpll import format_model, solve
from .parser import CnfParseError, read_cnf
from .state import SolverResult

ENV_VAR = "LIB_PLUSAT"

EXIT_SAT = 10
EXIT_UNSAT = 20
EXIT_NO_FILE = 5
EXIT_ERROR = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the CNF file named by the first argument; return the exit status."""
    start = time.process_time()
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        print("c Don't have a file")
        return EXIT_NO_FILE
    path = args[0]

    strategy = os.environ.get(ENV_VAR)
    if strategy is None:
        print(f"c {ENV_VAR} environment variable not set")
        strategy = DEFAULT_HOOKS_NAME
        print(f"c Setting value {strategy}")

    print(f"c FILE: {path}")

    try:
        hooks = load_hooks(strategy)
    except HookLoadError as exc:
        print(f"c {exc}")
        return EXIT_ERROR

    try:
        with open(path, encoding="utf-8") as stream:
            formula = read_cnf(stream)
    except (OSError, CnfParseError) as exc:
        print(f"c {exc}")
        return EXIT_ERROR
    parse_time = time.process_time() - start

    solution = solve(formula, hooks)
    solve_time = time.process_time() - start

    if solution.result is SolverResult.SAT:
        print(format_model(solution.model))
        print("s SATISFIABLE")
        status = EXIT_SAT
    else:
        print("s UNSATISFIABLE")
        status = EXIT_UNSAT

    total_time = time.process_time() - start
    print(
        f"c Time: {total_time:.3f}s "
        f"(Parser:{parse_time:.3f}s Solving:{solve_time:.3f}s)"
    )
    return status


if __name__ == "__main__":
    raise SystemExit(main())