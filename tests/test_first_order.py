import pytest

from logicbox.first_order import (
    AtomFormula,
    BinaryFormula,
    BinaryOperator,
    FalseFormula,
    FunctionTerm,
    Negation,
    QuantifiedFormula,
    Quantifier,
    Signature,
    Structure,
    TrueFormula,
    Variable,
    check_signature,
    check_term_signature,
    evaluate,
    evaluate_term,
    example_structure,
    format_formula,
    format_term,
    main,
)

X = Variable("x")
SX = FunctionTerm("S", (X,))
SSSX = FunctionTerm("S", (FunctionTerm("S", (SX,)),))
ZERO = FunctionTerm("0")
CYCLE = QuantifiedFormula(Quantifier.ALL, "x", AtomFormula("=", (SSSX, X)))
NOT_EXISTS = Negation(
    QuantifiedFormula(Quantifier.EXISTS, "x", AtomFormula("=", (ZERO, SX)))
)


def test_format_term():
    assert format_term(SSSX) == "S(S(S(x)))"
    assert format_term(ZERO) == "0"


def test_format_sample_formulas():
    assert format_formula(CYCLE) == "Ax =(S(S(S(x))), x)"
    assert format_formula(NOT_EXISTS) == "~Ex =(0, S(x))"


def test_format_binary_and_constants():
    formula = BinaryFormula(BinaryOperator.IMPL, TrueFormula(), FalseFormula())
    assert format_formula(formula) == "(T -> F)"


def test_evaluate_samples():
    structure = example_structure()
    assert evaluate(CYCLE, structure, {}) is True
    assert evaluate(NOT_EXISTS, structure, {}) is False


def test_evaluate_term_successor_wraps():
    structure = example_structure()
    assert evaluate_term(SX, structure, {"x": 2}) == 0
    assert evaluate_term(SSSX, structure, {"x": 1}) == 1


def test_free_variable_without_value_raises():
    with pytest.raises(KeyError):
        evaluate_term(X, example_structure(), {})


@pytest.mark.parametrize("operator", list(BinaryOperator))
def test_binary_operators_agree_with_apply(operator):
    structure = example_structure()
    for left in (TrueFormula(), FalseFormula()):
        for right in (TrueFormula(), FalseFormula()):
            result = evaluate(BinaryFormula(operator, left, right), structure, {})
            assert result == operator.apply(
                isinstance(left, TrueFormula), isinstance(right, TrueFormula)
            )


def test_quantifiers_over_empty_domain():
    structure = Structure(signature=Signature(), domain=set())
    assert evaluate(QuantifiedFormula(Quantifier.ALL, "x", FalseFormula()), structure, {})
    assert not evaluate(
        QuantifiedFormula(Quantifier.EXISTS, "x", TrueFormula()), structure, {}
    )


def test_quantifier_does_not_change_outer_valuation():
    valuation = {"x": 1}
    evaluate(CYCLE, example_structure(), valuation)
    assert valuation == {"x": 1}


def test_check_signature_accepts_samples():
    signature = example_structure().signature
    assert check_signature(CYCLE, signature)
    assert check_signature(NOT_EXISTS, signature)


def test_check_signature_rejects_wrong_arity_and_unknown_symbols():
    signature = example_structure().signature
    assert not check_signature(AtomFormula("=", (X,)), signature)
    assert not check_signature(AtomFormula("<", (X, X)), signature)
    assert not check_term_signature(FunctionTerm("S", (X, X)), signature)
    assert not check_signature(
        Negation(AtomFormula("=", (FunctionTerm("P", (X,)), X))), signature
    )


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Ax =(S(S(S(x))), x)",
        "evaluated: 1",
        "~Ex =(0, S(x))",
        "evaluated: 0",
    ]