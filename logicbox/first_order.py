"""Terms, formulas and structures of first-order logic, with evaluation."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

__all__ = [
    "Variable",
    "FunctionTerm",
    "TrueFormula",
    "FalseFormula",
    "AtomFormula",
    "Negation",
    "BinaryOperator",
    "BinaryFormula",
    "Quantifier",
    "QuantifiedFormula",
    "Signature",
    "Structure",
    "evaluate_term",
    "evaluate",
    "format_term",
    "format_formula",
    "check_term_signature",
    "check_signature",
    "example_structure",
    "main",
]


@dataclass(frozen=True)
class Variable:
    """A variable term."""

    name: str


@dataclass(frozen=True)
class FunctionTerm:
    """A function symbol applied to argument terms; constants have no arguments."""

    symbol: str
    args: tuple[Term, ...] = ()


Term = Variable | FunctionTerm


@dataclass(frozen=True)
class TrueFormula:
    """The constant true."""


@dataclass(frozen=True)
class FalseFormula:
    """The constant false."""


@dataclass(frozen=True)
class AtomFormula:
    """A relation symbol applied to argument terms."""

    symbol: str
    args: tuple[Term, ...] = ()


@dataclass(frozen=True)
class Negation:
    """The negation of a formula."""

    formula: Formula


class BinaryOperator(enum.Enum):
    """Binary connectives with their printed form."""

    AND = "&"
    OR = "|"
    IMPL = "->"
    EQL = "<->"

    def apply(self, left: bool, right: bool) -> bool:
        match self:
            case BinaryOperator.AND:
                return left and right
            case BinaryOperator.OR:
                return left or right
            case BinaryOperator.IMPL:
                return not left or right
            case BinaryOperator.EQL:
                return left == right
        raise AssertionError(self)


@dataclass(frozen=True)
class BinaryFormula:
    """Two formulas joined by a binary connective."""

    operator: BinaryOperator
    left: Formula
    right: Formula


class Quantifier(enum.Enum):
    """Quantifiers with their printed form."""

    ALL = "A"
    EXISTS = "E"


@dataclass(frozen=True)
class QuantifiedFormula:
    """A formula bound by a quantifier over one variable."""

    quantifier: Quantifier
    variable: str
    formula: Formula


Formula = (
    TrueFormula | FalseFormula | AtomFormula | Negation | BinaryFormula | QuantifiedFormula
)

FunctionImpl = Callable[[Sequence[int]], int]
RelationImpl = Callable[[Sequence[int]], bool]


@dataclass
class Signature:
    """Arities of the function and relation symbols of a language."""

    functions: dict[str, int] = field(default_factory=dict)
    relations: dict[str, int] = field(default_factory=dict)


@dataclass
class Structure:
    """A domain with interpretations of the symbols of a signature."""

    signature: Signature
    domain: set[int] = field(default_factory=set)
    functions: dict[str, FunctionImpl] = field(default_factory=dict)
    relations: dict[str, RelationImpl] = field(default_factory=dict)


def evaluate_term(term: Term, structure: Structure, valuation: Mapping[str, int]) -> int:
    """Return the value of a term; a missing variable or symbol raises KeyError."""
    match term:
        case Variable(name):
            return valuation[name]
        case FunctionTerm(symbol, args):
            values = [evaluate_term(arg, structure, valuation) for arg in args]
            return structure.functions[symbol](values)
    raise TypeError(f"not a term: {term!r}")


def evaluate(formula: Formula, structure: Structure, valuation: Mapping[str, int]) -> bool:
    """Return the truth value of a formula in a structure under a valuation."""
    match formula:
        case TrueFormula():
            return True
        case FalseFormula():
            return False
        case Negation(sub):
            return not evaluate(sub, structure, valuation)
        case BinaryFormula(operator, left, right):
            left_value = evaluate(left, structure, valuation)
            right_value = evaluate(right, structure, valuation)
            return operator.apply(left_value, right_value)
        case AtomFormula(symbol, args):
            values = [evaluate_term(arg, structure, valuation) for arg in args]
            return bool(structure.relations[symbol](values))
        case QuantifiedFormula(quantifier, variable, sub):
            extended = dict(valuation)

            def instances():
                for value in sorted(structure.domain):
                    extended[variable] = value
                    yield evaluate(sub, structure, extended)

            if quantifier is Quantifier.ALL:
                return all(instances())
            return any(instances())
    raise TypeError(f"not a formula: {formula!r}")


def _format_application(symbol: str, args: Sequence[Term]) -> str:
    if not args:
        return symbol
    return f"{symbol}({', '.join(format_term(arg) for arg in args)})"


def format_term(term: Term) -> str:
    """Render a term as text."""
    match term:
        case Variable(name):
            return name
        case FunctionTerm(symbol, args):
            return _format_application(symbol, args)
    raise TypeError(f"not a term: {term!r}")


def format_formula(formula: Formula) -> str:
    """Render a formula as text."""
    match formula:
        case TrueFormula():
            return "T"
        case FalseFormula():
            return "F"
        case Negation(sub):
            return "~" + format_formula(sub)
        case BinaryFormula(operator, left, right):
            return f"({format_formula(left)} {operator.value} {format_formula(right)})"
        case QuantifiedFormula(quantifier, variable, sub):
            return f"{quantifier.value}{variable} {format_formula(sub)}"
        case AtomFormula(symbol, args):
            return _format_application(symbol, args)
    raise TypeError(f"not a formula: {formula!r}")


def check_term_signature(term: Term, signature: Signature) -> bool:
    """Tell whether every function symbol of a term is declared with its arity."""
    match term:
        case Variable():
            return True
        case FunctionTerm(symbol, args):
            if signature.functions.get(symbol) != len(args):
                return False
            return all(check_term_signature(arg, signature) for arg in args)
    raise TypeError(f"not a term: {term!r}")


def check_signature(formula: Formula, signature: Signature) -> bool:
    """Tell whether a formula uses only symbols of the signature with their arities."""
    match formula:
        case TrueFormula() | FalseFormula():
            return True
        case Negation(sub):
            return check_signature(sub, signature)
        case BinaryFormula(_, left, right):
            return check_signature(left, signature) and check_signature(right, signature)
        case QuantifiedFormula(_, _, sub):
            return check_signature(sub, signature)
        case AtomFormula(symbol, args):
            if signature.relations.get(symbol) != len(args):
                return False
            return all(check_term_signature(arg, signature) for arg in args)
    raise TypeError(f"not a formula: {formula!r}")


def example_structure() -> Structure:
    """Integers modulo 3 with zero, successor and equality."""
    signature = Signature(functions={"0": 0, "S": 1}, relations={"=": 2})
    return Structure(
        signature=signature,
        domain={0, 1, 2},
        functions={"0": lambda args: 0, "S": lambda args: (args[0] + 1) % 3},
        relations={"=": lambda args: args[0] == args[1]},
    )


def _report(formula: Formula, structure: Structure) -> None:
    print(format_formula(formula))
    if check_signature(formula, structure.signature):
        print(f"evaluated: {int(evaluate(formula, structure, {}))}")
    else:
        print("Invalid signature!")


def main(argv: Sequence[str] | None = None) -> int:
    """Print and evaluate two sample formulas in the example structure."""
    structure = example_structure()

    x = Variable("x")
    sx = FunctionTerm("S", (x,))
    sssx = FunctionTerm("S", (FunctionTerm("S", (sx,)),))
    _report(
        QuantifiedFormula(Quantifier.ALL, "x", AtomFormula("=", (sssx, x))), structure
    )

    zero = FunctionTerm("0")
    exists = QuantifiedFormula(Quantifier.EXISTS, "x", AtomFormula("=", (zero, sx)))
    _report(Negation(exists), structure)
    return 0


if __name__ == "__main__":
    sys.exit(main())