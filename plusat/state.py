"""Assignment state and the decision trail of the solver."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LitState(enum.IntEnum):
    """Value of a variable or literal under the current assignment."""

    FALSE = 0
    TRUE = 1
    UNK = 2


class DecideState(enum.IntEnum):
    """Outcome of a decision step."""

    ALL_TRIED = 0
    FOUND_VAR = 1
    ALL_ASSIGNED = 2


class SolverResult(enum.IntEnum):
    """Final answer of the solver."""

    UNSAT = 0
    SAT = 1


@dataclass
class Decision:
    """One decision level: a 0-based variable, its value and whether it was flipped."""

    var: int
    value: LitState
    flipped: bool = False


class Trail:
    """Stack of decision levels together with the value of every variable."""

    def __init__(self, num_vars: int) -> None:
        if num_vars < 0:
            raise ValueError(f"number of variables must not be negative: {num_vars}")
        self.num_vars = num_vars
        self._levels: list[Decision] = []
        self._states: list[LitState] = [LitState.UNK] * num_vars

    def _check_var(self, var: int) -> None:
        if not 0 <= var < self.num_vars:
            raise IndexError(f"variable index {var} outside 0..{self.num_vars - 1}")

    def level(self) -> int:
        """Number of decision levels on the trail."""
        return len(self._levels)

    def decisions(self) -> tuple[Decision, ...]:
        """Decision levels, oldest first."""
        return tuple(self._levels)

    def insert_decision(self, var: int, value: LitState) -> Decision:
        """Assign ``value`` to ``var`` and push a new decision level."""
        self._check_var(var)
        if self._states[var] is not LitState.UNK:
            raise ValueError(f"variable index {var} is already assigned")
        value = LitState(value)
        self._states[var] = value
        decision = Decision(var, value)
        self._levels.append(decision)
        return decision

    def last_decision(self) -> Decision | None:
        """The newest decision, or None when the trail is empty."""
        return self._levels[-1] if self._levels else None

    def remove_last_decision(self) -> Decision:
        """Pop the newest decision and unassign its variable."""
        if not self._levels:
            raise IndexError("no decision to remove")
        decision = self._levels.pop()
        self._states[decision.var] = LitState.UNK
        return decision

    def literal_state(self, literal: int) -> LitState:
        """Value of a 1-based signed literal."""
        if literal == 0:
            raise ValueError("0 is not a literal")
        state = self.var_state(abs(literal) - 1)
        if literal < 0 and state is not LitState.UNK:
            return LitState.FALSE if state is LitState.TRUE else LitState.TRUE
        return state

    def var_state(self, var: int) -> LitState:
        """Value of a 0-based variable."""
        self._check_var(var)
        return self._states[var]

    def set_var_state(self, var: int, state: LitState) -> None:
        """Set the value of a 0-based variable without touching the levels."""
        self._check_var(var)
        self._states[var] = LitState(state)

    def backtrack_to(self, level: int) -> None:
        """Drop levels above ``level`` and flip the decision left on top."""
        if level < 1:
            raise ValueError(f"cannot backtrack to level {level}")
        while len(self._levels) > level:
            self.remove_last_decision()
        top = self._levels[-1]
        if top.value is LitState.TRUE:
            top.value = LitState.FALSE
        elif top.value is LitState.FALSE:
            top.value = LitState.TRUE
        self._states[top.var] = top.value
        top.flipped = True

    def model(self) -> list[int]:
        """Assigned variables as signed 1-based literals, in variable order."""
        result = []
        for index, state in enumerate(self._states, start=1):
            if state is LitState.TRUE:
                result.append(index)
            elif state is LitState.FALSE:
                result.append(-index)
        return result

    def describe(self) -> str:
        """Dump of the decision levels for debugging."""
        rule = "-----------\n"
        lines = "".join(
            f"->{d.var} {int(d.value)} {int(d.flipped)}\n" for d in self._levels
        )
        return rule + lines + rule