"""CNF formulas: clauses and an index of clauses by literal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def literal_position(literal: int) -> int:
    """Return the slot of ``literal`` in a per-literal table.

    Literal ``n`` lives at ``2n - 2`` and literal ``-n`` at ``2n - 1``.
    """
    if literal == 0:
        raise ValueError("0 is not a literal")
    return 2 * literal - 2 if literal > 0 else -2 * literal - 1


@dataclass(frozen=True)
class Clause:
    """A disjunction of non-zero literals."""

    literals: tuple[int, ...]

    def __post_init__(self) -> None:
        literals = tuple(int(lit) for lit in self.literals)
        if 0 in literals:
            raise ValueError("a clause cannot contain the literal 0")
        object.__setattr__(self, "literals", literals)

    def __len__(self) -> int:
        return len(self.literals)

    def __iter__(self) -> Iterator[int]:
        return iter(self.literals)


class Formula:
    """A CNF formula over variables ``1..num_vars``.

    Clauses are kept most recently added first, both in :attr:`clauses`
    and in the per-literal index returned by :meth:`clauses_with`.
    """

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must not be negative: {num_vars}")
        self.num_vars = num_vars
        self._clauses: deque[Clause] = deque()
        self._by_literal: list[deque[Clause]] = [deque() for _ in range(2 * num_vars)]

    @property
    def clauses(self) -> tuple[Clause, ...]:
        """All clauses, newest first."""
        return tuple(self._clauses)

    def _check_literal(self, literal: int) -> None:
        if literal == 0 or abs(literal) > self.num_vars:
            raise ValueError(
                f"literal {literal} is outside variables 1..{self.num_vars}"
            )

    def add_clause(self, clause: Clause | Iterable[int]) -> Clause:
        """Add a clause and index it under each of its literals."""
        if not isinstance(clause, Clause):
            clause = Clause(tuple(clause))
        for literal in clause:
            self._check_literal(literal)
        self._clauses.appendleft(clause)
        for literal in clause:
            self._by_literal[literal_position(literal)].appendleft(clause)
        return clause

    def clauses_with(self, literal: int) -> tuple[Clause, ...]:
        """Clauses that contain ``literal``, newest first."""
        self._check_literal(literal)
        return tuple(self._by_literal[literal_position(literal)])

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __repr__(self) -> str:
        return f"Formula(num_vars={self.num_vars}, clauses={len(self)})"