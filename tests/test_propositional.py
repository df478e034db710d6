import pytest

from logicbox.propositional import (
    Atom,
    Binary,
    Not,
    Operator,
    conj,
    depth,
    disj,
    format_formula,
    main,
)

P, Q, R = Atom(1), Atom(2), Atom(3)
SAMPLE = disj(conj(P, disj(Not(Q), R)), Q)


def test_format_sample():
    assert format_formula(SAMPLE) == "((p1^(~p2vp3))vp2)"


def test_constructors_set_operator():
    assert conj(P, Q) == Binary(P, Q, Operator.AND)
    assert disj(P, Q) == Binary(P, Q, Operator.OR)


def test_depth_of_atom_and_negation():
    assert depth(P) == 1
    assert depth(Not(Not(P))) == depth(P)


@pytest.mark.parametrize("make", [conj, disj])
def test_depth_adds_over_binary(make):
    left = conj(P, Not(Q))
    right = disj(R, R)
    assert depth(make(left, right)) == depth(left) + depth(right)


def test_format_is_prefixed_by_negation():
    assert format_formula(Not(SAMPLE)) == "~" + format_formula(SAMPLE)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == format_formula(SAMPLE)
    assert lines[1] == str(depth(SAMPLE))