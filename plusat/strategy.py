"""The default solving strategy: decision, propagation check and conflict handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .formula import Formula
from .state import DecideState, Decision, LitState, Trail


@dataclass(frozen=True)
class Hooks:
    """The steps the solver delegates to a strategy."""

    decide: Callable[[Formula, Trail], DecideState]
    bcp: Callable[[Formula, Trail, Decision], bool]
    resolve_conflict: Callable[[Trail], int]
    pre_processing: Callable[[Formula, Trail], None]


def pre_processing(formula: Formula, trail: Trail) -> None:
    """Prepare the formula before solving; the default strategy changes nothing."""


def decide(formula: Formula, trail: Trail) -> DecideState:
    """Assign FALSE to the first unassigned variable met in the clauses.

    Clauses are scanned newest first and literals in clause order.
    """
    for clause in formula:
        for literal in clause:
            var = abs(literal) - 1
            if trail.var_state(var) is LitState.UNK:
                trail.insert_decision(var, LitState.FALSE)
                return DecideState.FOUND_VAR
    return DecideState.ALL_ASSIGNED


def bcp(formula: Formula, trail: Trail, decision: Decision) -> bool:
    """Return False if the decision left some clause with every literal FALSE.

    Only clauses holding the literal that the decision made false are checked.
    """
    number = decision.var + 1
    falsified = number if decision.value == LitState.FALSE else -number
    return all(
        any(trail.literal_state(literal) is not LitState.FALSE for literal in clause)
        for clause in formula.clauses_with(falsified)
    )


def resolve_conflict(trail: Trail) -> int:
    """Level to backtrack to: the newest decision not yet flipped, or 0 if none."""
    levels = trail.decisions()
    return next(
        (
            index + 1
            for index, decision in reversed(list(enumerate(levels)))
            if not decision.flipped
        ),
        0,
    )


def default_hooks() -> Hooks:
    """Hooks made of this module's functions."""
    return Hooks(
        decide=decide,
        bcp=bcp,
        resolve_conflict=resolve_conflict,
        pre_processing=pre_processing,
    )