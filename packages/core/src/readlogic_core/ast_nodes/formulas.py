"""
Logical formulas: atoms, conjunctions, negations and rules.

Rules are definite clauses with negation as failure:

    head(T1, ..., Tn) :- [not] body1(...), ..., [not] bodyM(...).

The body of a rule is a DefiniteClauseConstruct, i.e. an Atom, a Conjunction
or a Negation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import FrozenSet, Tuple

from ..errors import InvariantViolationError
from .declarations import LogicalExpression
from .signature import AtomSignature
from .terms import (
    Constant,
    Term,
    TermFunction,
    Variable,
    collect_constants,
    collect_functions,
    collect_variables,
)


class Formula(LogicalExpression, ABC):
    """
    Base class for formulas.

    The variables, constants and functions of a formula are the union of
    those of its sub-formulas.
    """

    @property
    @abstractmethod
    def sub_formulas(self) -> Tuple['Formula', ...]:
        """The formulas directly contained in this formula."""
        pass

    @property
    @abstractmethod
    def is_unit(self) -> bool:
        pass

    @abstractmethod
    def to_text(self) -> str:
        """Canonical textual representation of this formula."""
        pass

    @cached_property
    def variables(self) -> FrozenSet[Variable]:
        return frozenset().union(*(f.variables for f in self.sub_formulas))

    @cached_property
    def constants(self) -> FrozenSet[Constant]:
        return frozenset().union(*(f.constants for f in self.sub_formulas))

    @cached_property
    def functions(self) -> FrozenSet[TermFunction]:
        return frozenset().union(*(f.functions for f in self.sub_formulas))

    @property
    def is_ground(self) -> bool:
        return not self.variables

    def count_atoms(self) -> int:
        """
        Number of literals in this formula. A conjunction counts the literals of
        both sides and nothing for itself.
        """
        return sum(f.count_atoms() for f in self.sub_formulas)

    def __str__(self):
        return self.to_text()


class DefiniteClauseConstruct(Formula):
    """Marker base for the formulas allowed in the body of a rule."""
    pass


def _require_formula(value, message: str):
    if value is None or not isinstance(value, Formula):
        raise InvariantViolationError(message)


@dataclass(frozen=True)
class Atom(DefiniteClauseConstruct):
    """
    Atomic formula, e.g. happensAt(walking(X), T) or a zero-arity atom like
    done.
    """
    symbol: str
    args: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'args', tuple(self.args))

    @property
    def arity(self) -> int:
        return len(self.args)

    @cached_property
    def signature(self) -> AtomSignature:
        return AtomSignature(self.symbol, self.arity)

    @property
    def sub_formulas(self) -> Tuple[Formula, ...]:
        return ()

    @property
    def is_unit(self) -> bool:
        return True

    @cached_property
    def variables(self) -> FrozenSet[Variable]:
        return collect_variables(self.args)

    @cached_property
    def constants(self) -> FrozenSet[Constant]:
        return collect_constants(self.args)

    @cached_property
    def functions(self) -> FrozenSet[TermFunction]:
        return collect_functions(self.args)

    def count_atoms(self) -> int:
        return 1

    def to_text(self) -> str:
        if not self.args:
            return self.symbol
        return self.symbol + "(" + ", ".join(a.to_text() for a in self.args) + ")"

    def __repr__(self):
        return f"Atom({self.to_text()})"


@dataclass(frozen=True)
class Conjunction(DefiniteClauseConstruct):
    """Logical conjunction of two formulas, printed as 'left, right'."""
    left: Formula
    right: Formula

    def __post_init__(self):
        _require_formula(self.left, "The left part of a conjunction cannot be empty")
        _require_formula(self.right, "The right part of a conjunction cannot be empty")

    @property
    def sub_formulas(self) -> Tuple[Formula, ...]:
        return (self.left, self.right)

    @property
    def is_unit(self) -> bool:
        return False

    def to_text(self) -> str:
        return f"{self.left.to_text()}, {self.right.to_text()}"

    def __repr__(self):
        return f"Conjunction({self.left!r}, {self.right!r})"


@dataclass(frozen=True)
class Negation(DefiniteClauseConstruct):
    """
    Negation as failure. Both 'not' and '\\+' are accepted by the parser; the
    printed form is always not(...).

    A negation counts as a single literal, whatever it wraps.
    """
    formula: Formula

    def __post_init__(self):
        _require_formula(self.formula, "The specified formula cannot be empty")

    @property
    def sub_formulas(self) -> Tuple[Formula, ...]:
        return (self.formula,)

    @property
    def is_unit(self) -> bool:
        return self.formula.is_unit

    def count_atoms(self) -> int:
        return 1

    def to_text(self) -> str:
        return f"not({self.formula.to_text()})"

    def __repr__(self):
        return f"Negation({self.formula!r})"


@dataclass(frozen=True)
class Rule(Formula):
    """
    A definite clause: head :- body.

    Headless rules and unit clauses (rules without a body) are rejected.
    """
    head: Atom
    body: DefiniteClauseConstruct

    def __post_init__(self):
        if not isinstance(self.head, Atom):
            raise InvariantViolationError(
                "The head of a rule must be an atom (headless rules are not supported)"
            )
        if not isinstance(self.body, DefiniteClauseConstruct):
            raise InvariantViolationError(
                "The body of a rule must be an atom, a conjunction or a negation "
                "(unit clauses are not supported)"
            )

    @property
    def sub_formulas(self) -> Tuple[Formula, ...]:
        return (self.head, self.body)

    @property
    def is_unit(self) -> bool:
        return False

    def to_text(self) -> str:
        return f"{self.head.to_text()} :- {self.body.to_text()}."

    def __repr__(self):
        return f"Rule({self.to_text()})"
