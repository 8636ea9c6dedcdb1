"""Lookup of solving strategies by name."""

from __future__ import annotations

from .strategy import Hooks, default_hooks

DEFAULT_HOOKS_NAME = "implement"

_REGISTRY: dict[str, Hooks] = {}


class HookLoadError(LookupError):
    """Raised when no strategy is known under the requested name."""


def register_hooks(name: str, hooks: Hooks) -> None:
    """Make ``hooks`` available under ``name``, replacing any earlier entry."""
    if not isinstance(hooks, Hooks):
        raise TypeError(f"expected Hooks, got {type(hooks).__name__}")
    if not name:
        raise ValueError("strategy name must not be empty")
    _REGISTRY[name] = hooks


def load_hooks(name: str) -> Hooks:
    """Return the strategy registered under ``name``."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise HookLoadError(f"no strategy registered under {name!r}") from None


def available_hooks() -> tuple[str, ...]:
    """Names of all registered strategies, sorted."""
    return tuple(sorted(_REGISTRY))


for _name in (DEFAULT_HOOKS_NAME, "simple", "clause_learning"):
    register_hooks(_name, default_hooks())