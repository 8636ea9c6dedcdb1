"""Reverse implication graph used to trace the causes of a conflict."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class DependencyGraph:
    """For each 1-based variable, the variables that implied its value."""

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must not be negative: {num_vars}")
        self.num_vars = num_vars
        self._refs: list[list[int]] = [[] for _ in range(num_vars)]

    def _slot(self, var: int) -> list[int]:
        if not 1 <= var <= self.num_vars:
            raise IndexError(f"variable {var} outside 1..{self.num_vars}")
        return self._refs[var - 1]

    def decide_variable(self, var: int) -> None:
        """Record a decided variable, which has no antecedents."""
        self.infer(var, ())

    def infer(self, var: int, references: Iterable[int]) -> None:
        """Record that ``var`` was implied by ``references``."""
        slot = self._slot(var)
        for ref in references:
            self._slot(ref)
            slot.insert(0, ref)

    def references(self, var: int) -> tuple[int, ...]:
        """Antecedents of ``var``, most recently recorded first."""
        return tuple(self._slot(var))

    def traverse(self, start: int) -> Iterator[int]:
        """Walk depth-first from ``start`` through its antecedents.

        A variable reached along several paths is yielded once per path.
        """
        stack = [start]
        self._slot(start)
        while stack:
            var = stack.pop()
            yield var
            stack.extend(self._slot(var))