import pytest

from plusat.formula import Formula
from plusat.state import DecideState, LitState, Trail
from plusat.strategy import (
    Hooks,
    bcp,
    decide,
    default_hooks,
    pre_processing,
    resolve_conflict,
)


def _formula(num_vars, *clauses):
    formula = Formula(num_vars)
    for clause in clauses:
        formula.add_clause(clause)
    return formula


def test_decide_picks_first_literal_of_newest_clause():
    formula = _formula(4, [1, 2], [3, -4])
    trail = Trail(4)
    assert decide(formula, trail) is DecideState.FOUND_VAR
    last = trail.last_decision()
    assert last.var == 3 - 1
    assert last.value is LitState.FALSE
    assert trail.level() == 1


def test_decide_skips_assigned_variables():
    formula = _formula(4, [1, 2], [3, -4])
    trail = Trail(4)
    trail.insert_decision(2, LitState.TRUE)
    decide(formula, trail)
    assert trail.last_decision().var == 4 - 1


def test_decide_reports_all_assigned():
    formula = _formula(2, [1, -2])
    trail = Trail(2)
    assert decide(formula, trail) is DecideState.FOUND_VAR
    assert decide(formula, trail) is DecideState.FOUND_VAR
    assert decide(formula, trail) is DecideState.ALL_ASSIGNED
    assert trail.level() == 2


def test_bcp_detects_falsified_unit_clause():
    formula = _formula(1, [1])
    trail = Trail(1)
    decision = trail.insert_decision(0, LitState.FALSE)
    assert bcp(formula, trail, decision) is False


def test_bcp_accepts_clause_with_unassigned_literal():
    formula = _formula(2, [1, 2])
    trail = Trail(2)
    decision = trail.insert_decision(0, LitState.FALSE)
    assert bcp(formula, trail, decision) is True


def test_bcp_true_decision_checks_negative_literal():
    formula = _formula(1, [-1])
    trail = Trail(1)
    decision = trail.insert_decision(0, LitState.TRUE)
    assert bcp(formula, trail, decision) is False


def test_bcp_ignores_clauses_without_falsified_literal():
    formula = _formula(2, [-1, 2])
    trail = Trail(2)
    decision = trail.insert_decision(0, LitState.FALSE)
    assert bcp(formula, trail, decision) is True


def test_resolve_conflict_on_empty_trail():
    assert resolve_conflict(Trail(3)) == 0


def test_resolve_conflict_returns_top_when_not_flipped():
    trail = Trail(3)
    trail.insert_decision(0, LitState.FALSE)
    trail.insert_decision(1, LitState.FALSE)
    assert resolve_conflict(trail) == trail.level()


def test_resolve_conflict_skips_flipped_levels():
    trail = Trail(3)
    trail.insert_decision(0, LitState.FALSE)
    trail.insert_decision(1, LitState.FALSE)
    trail.backtrack_to(2)
    assert resolve_conflict(trail) == 1
    trail.backtrack_to(1)
    assert resolve_conflict(trail) == 0


def test_pre_processing_leaves_state_untouched():
    formula = _formula(2, [1, 2])
    trail = Trail(2)
    assert pre_processing(formula, trail) is None
    assert len(formula) == 1
    assert trail.level() == 0


def test_default_hooks_use_module_functions():
    hooks = default_hooks()
    assert isinstance(hooks, Hooks)
    assert hooks.decide is decide
    assert hooks.bcp is bcp
    assert hooks.resolve_conflict is resolve_conflict
    assert hooks.pre_processing is pre_processing


def test_hooks_are_frozen():
    hooks = default_hooks()
    with pytest.raises(AttributeError):
        hooks.decide = None
    assert hooks.decide is decide