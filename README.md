# plusat

plusat is a small SAT solver built on the DPLL procedure. It reads formulas
in DIMACS CNF format, searches for a satisfying assignment by chronological
backtracking, and reports the result in SAT-competition style. The search
strategy (decision, conflict check, conflict resolution and pre-processing)
is a set of hooks that can be registered and chosen by name.

## Installation

```
pip install .
```

## Command line

```
plusat path/to/problem.cnf
```

Lines starting with `c` are comments, a `v` line lists the model when one
exists, and an `s` line gives the verdict:

```
c LIB_PLUSAT environment variable not set
c Setting value implement
c FILE: problem.cnf
v -1 -2 -3 0
s SATISFIABLE
c Time: 0.002s (Parser:0.001s Solving:0.001s)
```

The strategy is chosen with the `LIB_PLUSAT` environment variable, which
names a registered set of hooks. When it is unset, `implement` is used.
The names `implement`, `simple` and `clause_learning` are registered and
all refer to the default strategy.

Exit status:

- `10` — satisfiable
- `20` — unsatisfiable
- `5` — no file was given
- `1` — unknown strategy name, unreadable file or malformed CNF

## Library use

```python
from plusat.parser import parse_cnf
from plusat.strategy import default_hooks
from plusat.dpll import solve, format_model

formula = parse_cnf("""
c a tiny example
p cnf 3 2
1 -2 0
2 3 0
""")

solution = solve(formula, default_hooks())
if solution.satisfiable:
    print(format_model(solution.model))
```

`solve` returns a `Solution` with a `result` (`SolverResult.SAT` or
`SolverResult.UNSAT`) and, when satisfiable, a `model`: every assigned
variable as a signed 1-based literal. Variables that occur in no clause stay
unassigned and are left out of the model. `hooks` may be omitted, in which
case the default strategy is used.

Modules:

- `plusat.formula` — `Clause`, `Formula` and `literal_position`. A
  `Formula` keeps its clauses newest first and indexes them by literal,
  available through `Formula.clauses_with`.
- `plusat.parser` — `read_cnf` for open text streams and `parse_cnf` for
  strings. Malformed input, clauses before the `p cnf` line, or literals
  outside the declared variables raise `CnfParseError`.
- `plusat.state` — the decision `Trail` together with `LitState`,
  `DecideState`, `SolverResult` and `Decision`.
- `plusat.strategy` — the default `decide`, `bcp`, `resolve_conflict` and
  `pre_processing` functions, bundled by `default_hooks()` into a `Hooks`.
- `plusat.discovery` — `register_hooks`, `load_hooks` and
  `available_hooks` for named strategies; unknown names raise
  `HookLoadError`.
- `plusat.dpll` — `solve`, `Solution` and `format_model`.
- `plusat.learning` — a `DependencyGraph` recording which variables implied
  which, with depth-first `traverse`.
- `plusat.cli` — `main`, the command above.

## Limitations

- Strategies are Python `Hooks` objects registered in the running process
  with `register_hooks`; nothing is loaded from files or other libraries.
- The default `bcp` only detects a clause made entirely false by the last
  decision; it does not propagate unit clauses.
- `DependencyGraph` is a standalone tool. The solver does not use it and
  learns no clauses.

## Running the tests

```
pip install .[test]
pytest
```