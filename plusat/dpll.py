"""The DPLL search loop."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .formula import Formula
from .state import DecideState, SolverResult, Trail
from .strategy import Hooks, default_hooks


@dataclass(frozen=True)
class Solution:
    """Outcome of a search: the answer and, when satisfiable, the assignment."""

    result: SolverResult
    model: list[int] = field(default_factory=list)

    @property
    def satisfiable(self) -> bool:
        return self.result is SolverResult.SAT


def solve(formula: Formula, hooks: Hooks | None = None) -> Solution:
    """Search for an assignment satisfying ``formula`` using ``hooks``.

    The model lists every assigned variable as a signed 1-based literal;
    variables that occur in no clause stay unassigned and are left out.
    """
    if hooks is None:
        hooks = default_hooks()
    trail = Trail(formula.num_vars)
    hooks.pre_processing(formula, trail)

    while True:
        state = hooks.decide(formula, trail)

        while True:
            last = trail.last_decision()
            if last is None or hooks.bcp(formula, trail, last):
                break
            level = hooks.resolve_conflict(trail)
            if level == 0:
                return Solution(SolverResult.UNSAT)
            trail.backtrack_to(level)

        if state == DecideState.ALL_ASSIGNED:
            return Solution(SolverResult.SAT, trail.model())


def format_model(model: Iterable[int]) -> str:
    """Render a model as a ``v`` line ended by ``0``."""
    return "v " + "".join(f"{literal} " for literal in model) + "0"