"""Propositional formulas built from numbered atoms, conjunction, disjunction and negation."""

from __future__ import annotations

import enum
import sys
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["Operator", "Atom", "Not", "Binary", "conj", "disj", "format_formula", "depth", "main"]


class Operator(enum.Enum):
    """Binary connectives with their printed form."""

    AND = "^"
    OR = "v"


@dataclass(frozen=True)
class Atom:
    """The atom p<n>."""

    n: int


@dataclass(frozen=True)
class Not:
    """The negation of a formula."""

    formula: Formula


@dataclass(frozen=True)
class Binary:
    """Two formulas joined by a connective."""

    left: Formula
    right: Formula
    operator: Operator


Formula = Atom | Not | Binary


def conj(left: Formula, right: Formula) -> Binary:
    """Return the conjunction of two formulas."""
    return Binary(left, right, Operator.AND)


def disj(left: Formula, right: Formula) -> Binary:
    """Return the disjunction of two formulas."""
    return Binary(left, right, Operator.OR)


def format_formula(formula: Formula) -> str:
    """Render a formula as text."""
    match formula:
        case Atom(n):
            return f"p{n}"
        case Not(sub):
            return "~" + format_formula(sub)
        case Binary(left, right, operator):
            return f"({format_formula(left)}{operator.value}{format_formula(right)})"
    raise TypeError(f"not a formula: {formula!r}")


def depth(formula: Formula) -> int:
    """Return the measure of a formula: atoms count one, negation adds nothing."""
    match formula:
        case Atom():
            return 1
        case Not(sub):
            return depth(sub)
        case Binary(left, right, _):
            return depth(left) + depth(right)
    raise TypeError(f"not a formula: {formula!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a sample formula and its measure."""
    p, q, r = Atom(1), Atom(2), Atom(3)
    formula = disj(conj(p, disj(Not(q), r)), q)
    print(format_formula(formula))
    print(depth(formula))
    return 0


if __name__ == "__main__":
    sys.exit(main())