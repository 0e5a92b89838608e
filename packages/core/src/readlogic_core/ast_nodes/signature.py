"""
Atom signatures.

A signature uniquely identifies a predicate or a function by its name and
arity, so that overloaded names can be told apart:

    happensAt(walking(X), T)          happensAt/2, walking/1
    holdsAt(meeting(X, Y)=V, T)       holdsAt/2, meeting/3
"""

from dataclasses import dataclass

from ..errors import InvariantViolationError


@dataclass(frozen=True)
class AtomSignature:
    """
    Name and arity of an atom or a function. Equality and hashing are by the
    (symbol, arity) pair.
    """
    symbol: str
    arity: int

    def __post_init__(self):
        if self.symbol is None:
            raise InvariantViolationError("Cannot use None as symbol.")
        if len(self.symbol) == 0:
            raise InvariantViolationError("Cannot use an empty string as symbol.")
        if self.arity < 0:
            raise InvariantViolationError("The arity of an atom cannot be a negative number.")

    def __str__(self):
        return f"{self.symbol}/{self.arity}"
