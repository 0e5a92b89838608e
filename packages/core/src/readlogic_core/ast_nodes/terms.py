"""
Logical terms: variables, constants, functions and lists.

Terms are immutable values. Derived sets (variables, constants and functions
reachable from a term) are computed on first access and cached per instance.

Examples:
- Variable('X')                                   X
- StringConstant('foo')                           foo
- TermFunction('foo', [Variable('X')], [StringConstant('bar')])
                                                  foo(X)=bar
- TermList([IntegerConstant(1), IntegerConstant(2)])
                                                  [1, 2]
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from functools import cached_property
from typing import Any, ClassVar, FrozenSet, Iterable, Sequence, Tuple

from ..errors import InvariantViolationError
from .signature import AtomSignature

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

LIST_SYMBOL = "{L}"


class Term(ABC):
    """
    Base class for logical terms.

    Every term exposes a symbol, whether it is ground (no variable is
    reachable from it) and its canonical textual form.
    """

    symbol: Any

    @property
    def is_ground(self) -> bool:
        return False

    @property
    def is_variable(self) -> bool:
        return False

    @property
    def is_constant(self) -> bool:
        return False

    @property
    def is_function(self) -> bool:
        return False

    @property
    def is_list(self) -> bool:
        return False

    @abstractmethod
    def to_text(self) -> str:
        """Canonical textual representation of this term."""
        pass

    def __str__(self):
        return self.to_text()


@dataclass(frozen=True)
class Variable(Term):
    """
    A logical variable, e.g. X or Time1 (begins with an uppercase letter).
    """
    symbol: str

    @property
    def is_variable(self) -> bool:
        return True

    def to_text(self) -> str:
        return self.symbol

    def __repr__(self):
        return f"Variable({self.symbol})"


class Constant(Term):
    """
    Base class of the four constant kinds. Constants are always ground.
    """

    @property
    def is_ground(self) -> bool:
        return True

    @property
    def is_constant(self) -> bool:
        return True

    def to_text(self) -> str:
        return str(self.symbol)

    def __repr__(self):
        return f"{type(self).__name__}({self.to_text()})"


@dataclass(frozen=True, repr=False)
class BooleanConstant(Constant):
    symbol: bool

    def to_text(self) -> str:
        return "true" if self.symbol else "false"


@dataclass(frozen=True, repr=False)
class IntegerConstant(Constant):
    """64-bit signed integer constant."""
    symbol: int

    def __post_init__(self):
        if not INT64_MIN <= self.symbol <= INT64_MAX:
            raise InvariantViolationError(
                f"Integer constant {self.symbol} does not fit in 64 bits"
            )


@dataclass(frozen=True, repr=False)
class FloatConstant(Constant):
    """Double precision constant, printed in positional notation, e.g. 0.00001"""
    symbol: float

    def to_text(self) -> str:
        if not math.isfinite(self.symbol):
            return repr(self.symbol)
        text = format(Decimal(repr(self.symbol)), "f")
        return text if "." in text else text + ".0"


@dataclass(frozen=True, repr=False)
class StringConstant(Constant):
    """
    String constant. Quoted literals keep their quotes in the symbol when the
    quoted text starts with an uppercase letter or a digit, e.g. 'HN' or "83".
    """
    symbol: str


@dataclass(frozen=True)
class TermFunction(Term):
    """
    A logical function, optionally associated with one or more values.

    Forms:
    - foo(), foo(bar, X)                 (simple)
    - foo(X)=bar                         (valued)
    - foo(X)=(bar, Y)                    (multi-valued)
    - (3, 5)                             (anonymous tuple, empty symbol)

    The arity counts both the arguments and the values.
    """
    symbol: str
    terms: Tuple[Term, ...] = ()
    values: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'terms', tuple(self.terms))
        object.__setattr__(self, 'values', tuple(self.values))

    @property
    def arity(self) -> int:
        return len(self.terms) + len(self.values)

    @cached_property
    def signature(self) -> AtomSignature:
        return AtomSignature(self.symbol, self.arity)

    @cached_property
    def variables(self) -> FrozenSet['Variable']:
        return collect_variables_lists([self.terms, self.values])

    @cached_property
    def constants(self) -> FrozenSet[Constant]:
        return collect_constants_lists([self.terms, self.values])

    @cached_property
    def functions(self) -> FrozenSet['TermFunction']:
        return collect_functions_lists([self.terms, self.values])

    @property
    def is_ground(self) -> bool:
        return not self.variables

    @property
    def is_function(self) -> bool:
        return True

    @property
    def is_multivalued(self) -> bool:
        return len(self.values) > 0

    def to_text(self) -> str:
        args = "(" + ", ".join(t.to_text() for t in self.terms) + ")"

        if not self.values:
            return self.symbol + args
        if len(self.values) == 1:
            return f"{self.symbol}{args}={self.values[0].to_text()}"
        return f"{self.symbol}{args}=(" + ", ".join(v.to_text() for v in self.values) + ")"

    def __repr__(self):
        return f"TermFunction({self.to_text()})"


@dataclass(frozen=True)
class TermList(Term):
    """
    A list of terms, e.g. [a, X, f(Y)]. The head/tail sugar [H | T] is
    resolved by the parser, so a TermList is always a flat sequence.
    """
    terms: Tuple[Term, ...] = ()

    # Sentinel used for identity only, never printed
    symbol: ClassVar[str] = LIST_SYMBOL

    def __post_init__(self):
        object.__setattr__(self, 'terms', tuple(self.terms))

    @cached_property
    def variables(self) -> FrozenSet[Variable]:
        return collect_variables(self.terms)

    @cached_property
    def constants(self) -> FrozenSet[Constant]:
        return collect_constants(self.terms)

    @cached_property
    def functions(self) -> FrozenSet[TermFunction]:
        return collect_functions(self.terms)

    @property
    def is_ground(self) -> bool:
        return not self.variables

    @property
    def is_list(self) -> bool:
        return True

    @property
    def head(self) -> Term:
        if not self.terms:
            raise InvariantViolationError("An empty list has no head")
        return self.terms[0]

    @property
    def tail(self) -> 'TermList':
        return TermList(self.terms[1:])

    def to_text(self) -> str:
        return "[" + ", ".join(t.to_text() for t in self.terms) + "]"

    def __repr__(self):
        return f"TermList({self.to_text()})"


# =============================================================================
# Collectors
# =============================================================================

def collect_variables(terms: Iterable[Term]) -> FrozenSet[Variable]:
    """Collect all variables reachable from the given terms."""
    result = set()
    for term in terms:
        if isinstance(term, Variable):
            result.add(term)
        elif isinstance(term, (TermList, TermFunction)):
            result |= term.variables
    return frozenset(result)


def collect_variables_lists(term_lists: Iterable[Sequence[Term]]) -> FrozenSet[Variable]:
    """Collect all variables reachable from a sequence of term sequences."""
    result = set()
    for terms in term_lists:
        result |= collect_variables(terms)
    return frozenset(result)


def collect_constants(terms: Iterable[Term]) -> FrozenSet[Constant]:
    """Collect all constants reachable from the given terms."""
    result = set()
    for term in terms:
        if isinstance(term, Constant):
            result.add(term)
        elif isinstance(term, (TermList, TermFunction)):
            result |= term.constants
    return frozenset(result)


def collect_constants_lists(term_lists: Iterable[Sequence[Term]]) -> FrozenSet[Constant]:
    result = set()
    for terms in term_lists:
        result |= collect_constants(terms)
    return frozenset(result)


def collect_functions(terms: Iterable[Term]) -> FrozenSet[TermFunction]:
    """
    Collect all functions reachable from the given terms. A function
    contributes itself along with the functions nested in it.
    """
    result = set()
    for term in terms:
        if isinstance(term, TermFunction):
            result.add(term)
            result |= term.functions
        elif isinstance(term, TermList):
            result |= term.functions
    return frozenset(result)


def collect_functions_lists(term_lists: Iterable[Sequence[Term]]) -> FrozenSet[TermFunction]:
    result = set()
    for terms in term_lists:
        result |= collect_functions(terms)
    return frozenset(result)
