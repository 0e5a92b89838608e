"""
Unit tests for formula construction, signatures and derived sets.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from readlogic_core import (
    Atom,
    AtomSignature,
    Conjunction,
    IntegerConstant,
    Negation,
    Rule,
    StringConstant,
    TermFunction,
    Variable,
    InvariantViolationError,
)


X, Y = Variable("X"), Variable("Y")


class TestAtomSignature:
    """Test AtomSignature validation and equality."""

    def test_str(self):
        assert str(AtomSignature("happensAt", 2)) == "happensAt/2"

    def test_equality(self):
        assert AtomSignature("p", 1) == AtomSignature("p", 1)
        assert AtomSignature("p", 1) != AtomSignature("p", 2)
        assert len({AtomSignature("p", 1), AtomSignature("p", 1)}) == 1

    @pytest.mark.parametrize("symbol,arity", [
        (None, 1),
        ("", 1),
        ("p", -1),
    ])
    def test_invalid_signature(self, symbol, arity):
        with pytest.raises(InvariantViolationError):
            AtomSignature(symbol, arity)

    def test_zero_arity(self):
        assert AtomSignature("done", 0).arity == 0

    def test_overloaded_names(self):
        """Same name with different arity gives different signatures"""
        assert Atom("p", [X]).signature != Atom("p", [X, Y]).signature


class TestAtoms:

    def test_derived_sets(self):
        f = TermFunction("walking", [X], [StringConstant("fast")])
        atom = Atom("happensAt", [f, Y])

        assert atom.variables == {X, Y}
        assert atom.constants == {StringConstant("fast")}
        assert atom.functions == {f}
        assert atom.arity == 2

    def test_args_are_hashable(self):
        atom = Atom("p", [X, IntegerConstant(1)])
        assert atom.args == (X, IntegerConstant(1))
        assert len({atom, Atom("p", (X, IntegerConstant(1)))}) == 1


class TestConjunctionAndNegation:

    def test_conjunction(self):
        a, b = Atom("a", [X]), Atom("b", [Y])
        conj = Conjunction(a, b)

        assert conj.to_text() == "a(X), b(Y)"
        assert conj.variables == {X, Y}
        assert not conj.is_unit
        assert conj.count_atoms() == 2

    def test_conjunction_adds_nothing_to_atom_count(self):
        nested = Conjunction(Conjunction(Atom("a"), Atom("b")), Atom("c"))
        assert nested.count_atoms() == 3

    def test_negation_of_atom(self):
        neg = Negation(Atom("a", [X]))

        assert neg.to_text() == "not(a(X))"
        assert neg.is_unit
        assert neg.count_atoms() == 1
        assert neg.variables == {X}

    def test_negation_of_conjunction(self):
        neg = Negation(Conjunction(Atom("a", [X]), Atom("b", [Y])))

        assert neg.to_text() == "not(a(X), b(Y))"
        assert not neg.is_unit
        assert neg.count_atoms() == 1

    @pytest.mark.parametrize("left,right", [
        (None, Atom("a")),
        (Atom("a"), None),
        (Atom("a"), X),
    ])
    def test_conjunction_requires_formulas(self, left, right):
        with pytest.raises(InvariantViolationError):
            Conjunction(left, right)

    def test_negation_requires_formula(self):
        with pytest.raises(InvariantViolationError):
            Negation(None)


class TestRules:

    def test_rule(self):
        head = Atom("p", [X])
        body = Conjunction(Atom("q", [X]), Negation(Atom("r", [Y])))
        rule = Rule(head, body)

        assert rule.to_text() == "p(X) :- q(X), not(r(Y))."
        assert rule.variables == {X, Y}
        assert rule.count_atoms() == 3
        assert not rule.is_unit
        assert str(rule) == rule.to_text()

    def test_atom_body_contributes_its_sets(self):
        rule = Rule(Atom("p", [X]), Atom("q", [Y, StringConstant("c")]))
        assert rule.variables == {X, Y}
        assert rule.constants == {StringConstant("c")}

    @pytest.mark.parametrize("head,body", [
        (None, Atom("q")),
        (Atom("p"), None),
        (Negation(Atom("p")), Atom("q")),
        (Conjunction(Atom("p"), Atom("q")), Atom("r")),
    ])
    def test_invalid_rule(self, head, body):
        with pytest.raises(InvariantViolationError):
            Rule(head, body)

    def test_rule_cannot_be_a_body(self):
        inner = Rule(Atom("q"), Atom("r"))
        with pytest.raises(InvariantViolationError):
            Rule(Atom("p"), inner)

    def test_invariant_violation_is_a_value_error(self):
        with pytest.raises(ValueError):
            Rule(Atom("p"), None)
