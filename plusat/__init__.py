"""A DPLL SAT solver for DIMACS CNF formulas with pluggable strategies."""

__version__ = "0.1.0"

__all__ = ["cli", "discovery", "dpll", "formula", "learning", "parser", "state", "strategy"]