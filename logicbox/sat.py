"""A backtracking SAT solver over CNF formulas read in DIMACS form."""

from __future__ import annotations

import io
import itertools
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

__all__ = [
    "CnfFormatError",
    "PartialValuation",
    "is_pure_literal",
    "solve",
    "read_cnf",
    "main",
]

Literal = int
Clause = list[Literal]
Cnf = list[Clause]

_DECISION = 0


class CnfFormatError(ValueError):
    """Raised when DIMACS CNF input is malformed or truncated."""


@dataclass
class PartialValuation:
    """Assigned atoms together with the trail of literals; 0 marks a decision."""

    atom_count: int = 0
    trail: list[Literal] = field(default_factory=list)
    values: dict[int, bool] = field(default_factory=dict)

    def push(self, literal: Literal, decide: bool) -> None:
        """Assign a literal, marking it as a decision if asked."""
        if decide:
            self.trail.append(_DECISION)
        self.trail.append(literal)
        self.values[abs(literal)] = literal > 0

    def backtrack(self) -> Literal | None:
        """Undo up to the last decision and return the decided literal, or None if none."""
        literal = None
        while self.trail and self.trail[-1] != _DECISION:
            literal = self.trail.pop()
            del self.values[abs(literal)]
        if not self.trail:
            return None
        self.trail.pop()
        return literal

    def _is_true(self, literal: Literal) -> bool | None:
        value = self.values.get(abs(literal))
        return None if value is None else value == (literal > 0)

    def is_conflict(self, clause: Iterable[Literal]) -> bool:
        """Tell whether every literal of the clause is assigned and false."""
        return all(self._is_true(literal) is False for literal in clause)

    def has_conflict(self, formula: Iterable[Iterable[Literal]]) -> bool:
        """Tell whether some clause is in conflict."""
        return any(self.is_conflict(clause) for clause in formula)

    def unit_literal(self, clause: Iterable[Literal]) -> Literal | None:
        """Return the only unassigned literal of an unsatisfied clause, if there is one."""
        unit = None
        for literal in clause:
            state = self._is_true(literal)
            if state is None:
                if unit is not None:
                    return None
                unit = literal
            elif state:
                return None
        return unit

    def find_unit_literal(self, formula: Iterable[Iterable[Literal]]) -> Literal | None:
        """Return the unit literal of the first unit clause, if any."""
        for clause in formula:
            unit = self.unit_literal(clause)
            if unit is not None:
                return unit
        return None

    def next_literal(self) -> Literal | None:
        """Return the lowest unassigned atom, if any."""
        return next(
            (atom for atom in range(1, self.atom_count + 1) if atom not in self.values),
            None,
        )

    def trail_text(self) -> str:
        """Render the trail, with '|' before each decision."""
        return "".join("| " if literal == _DECISION else f"{literal} " for literal in self.trail)


def is_pure_literal(literal: Literal, formula: Iterable[Iterable[Literal]]) -> bool:
    """Tell whether the complement of a literal occurs nowhere in the formula."""
    return all(-literal not in clause for clause in formula)


def solve(
    formula: Sequence[Sequence[Literal]],
    atom_count: int,
    trace: Callable[[str], object] | None = None,
) -> PartialValuation | None:
    """Search for a satisfying valuation; return it, or None if the formula is unsatisfiable.

    If trace is given it receives the rendered trail before each step.
    """
    valuation = PartialValuation(atom_count=atom_count)
    while True:
        if trace is not None:
            trace(valuation.trail_text())
        if valuation.has_conflict(formula):
            literal = valuation.backtrack()
            if literal is None:
                return None
            valuation.push(-literal, False)
        elif (literal := valuation.find_unit_literal(formula)) is not None:
            valuation.push(literal, False)
        elif (literal := valuation.next_literal()) is not None:
            valuation.push(literal, True)
        else:
            return valuation


def _header_and_rest(stream: TextIO) -> Iterable[str]:
    lines = iter(stream)
    for line in lines:
        words = line.split()
        for index, word in enumerate(words):
            if word == "c":
                break
            if word == "p":
                rest = words[index + 1 :]
                return itertools.chain(rest, (w for later in lines for w in later.split()))
    raise CnfFormatError("missing 'p cnf' header")


def _read_int(tokens: Iterable[str], what: str) -> int:
    try:
        token = next(iter(tokens))
    except StopIteration:
        raise CnfFormatError(f"unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise CnfFormatError(f"expected an integer for {what}, got {token!r}") from None


def read_cnf(stream: TextIO) -> tuple[Cnf, int]:
    """Read a DIMACS CNF formula; return its clauses and the number of atoms."""
    tokens = iter(_header_and_rest(stream))
    if next(tokens, None) is None:
        raise CnfFormatError("unexpected end of input after 'p'")
    atom_count = _read_int(tokens, "the atom count")
    clause_count = _read_int(tokens, "the clause count")
    if atom_count < 0 or clause_count < 0:
        raise CnfFormatError("counts in the header must not be negative")

    formula: Cnf = []
    for _ in range(clause_count):
        clause: Clause = []
        while (literal := _read_int(tokens, "a literal")) != 0:
            clause.append(literal)
        formula.append(clause)
    return formula, atom_count


_SAMPLE = "c ovo je jedan komentar\np cnf 3 2\n1 -2 0\n-1 -2 3 0\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Solve a sample formula, printing the search and some pure-literal checks."""
    formula, atom_count = read_cnf(io.StringIO(_SAMPLE))
    valuation = solve(formula, atom_count, trace=print)

    for literal in (-2, 3, 1, 2):
        mark = "T" if is_pure_literal(literal, formula) else "F"
        print(f"{literal} is pure:{mark}")

    if valuation is not None:
        print("SAT")
        print(valuation.trail_text())
    else:
        print("UNSAT")
    return 0


if __name__ == "__main__":
    sys.exit(main())