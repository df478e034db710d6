# logicbox

A small toolkit for working with logical formulas. It has no dependencies
beyond the standard library and needs Python 3.10 or later.

- **First-order logic** (`logicbox.first_order`): terms (`Variable`,
  `FunctionTerm`) and formulas (`TrueFormula`, `FalseFormula`, `AtomFormula`,
  `Negation`, `BinaryFormula` with a `BinaryOperator`, `QuantifiedFormula`
  with a `Quantifier`). Formulas can be checked against a `Signature`,
  rendered as text, and evaluated in a finite `Structure` under a valuation.
- **Propositional formulas** (`logicbox.propositional`): `Atom`, `Not` and
  `Binary` nodes (with an `Operator`), built with the helpers `conj` and
  `disj`. A formula can be rendered with `format_formula` and measured with
  `depth`, which counts each atom occurrence once and adds nothing for a
  negation.
- **SAT solving** (`logicbox.sat`): `read_cnf` reads CNF in DIMACS format and
  `solve` searches for a satisfying assignment by backtracking with unit
  propagation, using a `PartialValuation`. `is_pure_literal` tells whether the
  complement of a literal appears nowhere in a formula.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

### First-order logic

```python
from logicbox.first_order import (
    Variable, FunctionTerm, AtomFormula, QuantifiedFormula, Quantifier,
    check_signature, evaluate, example_structure, format_formula,
)

x = Variable("x")
sx = FunctionTerm("S", (x,))
formula = QuantifiedFormula(
    Quantifier.ALL, "x",
    AtomFormula("=", (FunctionTerm("S", (FunctionTerm("S", (sx,)),)), x)),
)

structure = example_structure()   # domain {0, 1, 2}, S(x) = x + 1 mod 3
print(format_formula(formula))    # Ax =(S(S(S(x))), x)
assert check_signature(formula, structure.signature)
print(evaluate(formula, structure, {}))   # True
```

`evaluate` raises `KeyError` when a free variable has no value in the
valuation or a symbol has no interpretation in the structure; use
`check_signature` first to catch undeclared symbols and wrong arities.

### Propositional depth

```python
from logicbox.propositional import Atom, Not, conj, disj, depth, format_formula

p, q, r = Atom(1), Atom(2), Atom(3)
f = disj(conj(p, disj(Not(q), r)), q)
print(format_formula(f))  # ((p1^(~p2vp3))vp2)
print(depth(f))           # 4
```

### SAT

```python
import io
from logicbox.sat import read_cnf, solve

text = "c a comment\np cnf 3 2\n1 -2 0\n-1 -2 3 0\n"
formula, atom_count = read_cnf(io.StringIO(text))
result = solve(formula, atom_count)
if result is None:
    print("UNSAT")
else:
    print("SAT", result.values)
```

`solve` returns a `PartialValuation` (its `values` map atoms to booleans and
`trail_text()` renders the assignment trail, with `|` before each decision) or
`None` when the formula is unsatisfiable. Pass `trace=print` to see the trail
before every step of the search. `read_cnf` raises `CnfFormatError` on a
missing header, a non-integer token, negative counts or truncated input.

## Command-line tools

```
logicbox-fol      # prints and evaluates two built-in first-order formulas
logicbox-depth    # prints a built-in propositional formula and its depth
logicbox-sat      # solves a built-in DIMACS sample, tracing the search
```

## Limitations

The commands only run their built-in examples and take no arguments: there is
no command that reads a formula or a DIMACS file from disk. To solve your own
CNF, call `read_cnf` and `solve` from Python. There is no parser for
propositional or first-order formulas written as text; formulas are built from
the classes above.