"""
Classification of raw text fragments into logical terms.

The grammar isolates a fragment (an identifier, a number or a quoted literal)
and extract_term() decides which kind of term it denotes. Several patterns
overlap, so they are tried in a fixed order:

1. quoted text starting with an uppercase letter, a digit  -> StringConstant, quotes kept
   or '-'
2. quoted text starting with a lowercase letter             -> StringConstant, quotes dropped
                                                               (kept for 'true' and 'false')
3. lowercase identifier                                     -> BooleanConstant (true/false)
                                                               or StringConstant
4. floating point number                                    -> FloatConstant
5. integer number                                           -> IntegerConstant
6. uppercase identifier                                     -> Variable
7. an already built TermFunction or TermList                -> unchanged
"""

import re
from typing import Any, Iterable, List

from ..ast_nodes import (
    BooleanConstant,
    FloatConstant,
    IntegerConstant,
    StringConstant,
    Term,
    TermFunction,
    TermList,
    Variable,
)
from ..errors import InvariantViolationError, TermClassificationError

_SYMBOL_TAIL = r"(?:[a-zA-Z0-9]|_[a-zA-Z0-9])*"

LOWER_CASE_PATTERN = re.compile(r"[a-z]" + _SYMBOL_TAIL)
UPPER_CASE_PATTERN = re.compile(r"[A-Z]" + _SYMBOL_TAIL)

# Quoted text starting with '-' keeps its quotes, whatever follows
_QUOTED_KEPT_HEAD = r"(?:-?[A-Z0-9]|-[a-z])"

SINGLE_QUOTED_UPPER_PATTERN = re.compile(r"'" + _QUOTED_KEPT_HEAD + _SYMBOL_TAIL + "'")
SINGLE_QUOTED_LOWER_PATTERN = re.compile(r"'([a-z]" + _SYMBOL_TAIL + ")'")
DOUBLE_QUOTED_UPPER_PATTERN = re.compile(r'"' + _QUOTED_KEPT_HEAD + _SYMBOL_TAIL + '"')
DOUBLE_QUOTED_LOWER_PATTERN = re.compile(r'"([a-z]' + _SYMBOL_TAIL + ')"')

# Quoted keywords keep their quotes so they stay strings when read back
KEYWORDS = {"true", "false"}

FLOATING_POINT_PATTERN = re.compile(r"-?\d+\.\d+")
INTEGER_PATTERN = re.compile(r"-?\d+")


def extract_term(argument: Any) -> Term:
    """
    Classify a single argument as a logical term.

    Raises:
        TermClassificationError: If the argument matches none of the patterns
    """
    if isinstance(argument, (TermFunction, TermList)):
        return argument

    if not isinstance(argument, str):
        raise TermClassificationError(argument)
    # Lark tokens are str subclasses
    argument = str(argument)

    if SINGLE_QUOTED_UPPER_PATTERN.fullmatch(argument) or DOUBLE_QUOTED_UPPER_PATTERN.fullmatch(argument):
        return StringConstant(argument)

    match = (SINGLE_QUOTED_LOWER_PATTERN.fullmatch(argument)
             or DOUBLE_QUOTED_LOWER_PATTERN.fullmatch(argument))
    if match:
        if match.group(1) in KEYWORDS:
            return StringConstant(argument)
        return StringConstant(match.group(1))

    if LOWER_CASE_PATTERN.fullmatch(argument):
        if argument in KEYWORDS:
            return BooleanConstant(argument == "true")
        return StringConstant(argument)

    if FLOATING_POINT_PATTERN.fullmatch(argument):
        return FloatConstant(float(argument))

    if INTEGER_PATTERN.fullmatch(argument):
        try:
            return IntegerConstant(int(argument))
        except InvariantViolationError:
            raise TermClassificationError(argument)

    if UPPER_CASE_PATTERN.fullmatch(argument):
        return Variable(argument)

    raise TermClassificationError(argument)


def extract_terms(arguments: Iterable[Any]) -> List[Term]:
    """Classify every argument of a predicate or a function."""
    return [extract_term(arg) for arg in arguments]
