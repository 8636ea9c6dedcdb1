"""Reader for formulas in the DIMACS CNF format."""

from __future__ import annotations

import re
from typing import TextIO

from .formula import Clause, Formula

_NON_SPACE = re.compile(r"\S")
_PROBLEM = re.compile(r"\s*cnf\s+(-?\d+)\s+(-?\d+)")
_INTEGER = re.compile(r"\s*(-?\d+)")
_CLAUSE_START = frozenset("-123456789")


class CnfParseError(ValueError):
    """Raised when a CNF document cannot be read."""


def read_cnf(stream: TextIO) -> Formula:
    """Read a CNF formula from a text stream."""
    return parse_cnf(stream.read())


def _read_clause(text: str, pos: int) -> tuple[list[int], int]:
    literals: list[int] = []
    while True:
        match = _INTEGER.match(text, pos)
        if match is None:
            raise CnfParseError(f"clause not terminated by 0 at offset {pos}")
        pos = match.end()
        literal = int(match.group(1))
        if literal == 0:
            return literals, pos
        literals.append(literal)


def parse_cnf(text: str) -> Formula:
    """Parse a CNF formula from a string.

    Comment lines start with ``c``; the problem line is ``p cnf V C``;
    each clause is a run of literals ended by ``0`` and may span lines.
    Any other character outside these is skipped.
    """
    formula: Formula | None = None
    pos = 0
    while True:
        found = _NON_SPACE.search(text, pos)
        if found is None:
            break
        char = found.group()
        pos = found.end()

        if char == "c":
            newline = text.find("\n", pos)
            pos = len(text) if newline < 0 else newline + 1
        elif char == "p":
            problem = _PROBLEM.match(text, pos)
            if problem is None:
                raise CnfParseError(f"malformed problem line at offset {found.start()}")
            num_vars = int(problem.group(1))
            if num_vars < 0:
                raise CnfParseError(f"negative number of variables: {num_vars}")
            formula = Formula(num_vars)
            pos = problem.end()
        elif char in _CLAUSE_START:
            if formula is None:
                raise CnfParseError("clause found before the problem line")
            literals, pos = _read_clause(text, found.start())
            try:
                formula.add_clause(Clause(tuple(literals)))
            except ValueError as exc:
                raise CnfParseError(str(exc)) from exc

    if formula is None:
        raise CnfParseError("no problem line found")
    return formula