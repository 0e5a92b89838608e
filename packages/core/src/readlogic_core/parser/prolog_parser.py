"""
Parser for Prolog-like terms, atoms and rules, using Lark
"""

import logging
from functools import lru_cache
from typing import List, Optional, Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from ..ast_nodes import (
    Atom,
    Conjunction,
    IncludeFileExpression,
    LogicalExpression,
    Negation,
    Rule,
    Term,
    TermFunction,
    TermList,
    Variable,
)
from ..config import ParserConfig
from ..errors import GrammarError
from .extraction import extract_term

logger = logging.getLogger(__name__)


# Infix relational operators, rewritten to utility predicates
RELATIONAL_OPERATORS = {
    "=:=": "equals",
    "=\\=": "not_equals",
    "<": "lessThan",
    ">": "greaterThan",
    "=<": "lessThanEq",
    ">=": "greaterThanEq",
}

# Infix arithmetic operators, rewritten to utility functions
ARITHMETIC_OPERATORS = {
    "+": "plus",
    "-": "minus",
    "*": "product",
    "/": "divide",
    "mod": "modulo",
}

# Grammar start symbol and a description used in error messages
ENTRY_POINTS = {
    "term": ("term_input", "a term"),
    "term_list": ("term_list_input", "a list of terms"),
    "function": ("function_input", "a function"),
    "atom": ("atom_input", "an atomic formula"),
    "rule": ("rule_input", "a rule"),
    "rules": ("rules_input", "a sequence of rules"),
    "program": ("program_input", "a knowledge base"),
    "infix_function": ("infix_function_input", "an infix function"),
}


def _operand_text(operand: Union[Token, Term]) -> str:
    if isinstance(operand, Term):
        return operand.to_text()
    return str(operand)


def _optional_args(items, index: int) -> List[Term]:
    """Arguments of an optional [args] group (Lark gives None when absent)"""
    if len(items) > index and items[index] is not None:
        return list(items[index])
    return []


class PrologTransformer(Transformer):
    """
    Transforms the Lark parse tree into ReadLogic AST nodes
    """

    def __init__(self, parser: 'PrologParser'):
        super().__init__()
        # Used to re-parse the rewritten form of infix expressions
        self._parser = parser

    # ============ ENTRY POINTS ============

    def term_input(self, items):
        return items[0]

    def term_list_input(self, items):
        return items[0]

    def function_input(self, items):
        return items[0]

    def atom_input(self, items):
        return items[0]

    def rule_input(self, items):
        return items[0]

    def infix_function_input(self, items):
        return items[0]

    def rules_input(self, items):
        return list(items)

    def program_input(self, items):
        return list(items)

    def include_directive(self, items):
        """Parse include directive: #include "file" """
        filename = str(items[0])[1:-1]
        return IncludeFileExpression(filename=filename)

    # ============ FORMULAS ============

    def rule(self, items):
        """Parse rule: head :- body."""
        head, body = items
        return Rule(head=head, body=body)

    def body(self, items):
        """Fold comma separated literals into left-associative conjunctions"""
        result = items[0]
        for right in items[1:]:
            result = Conjunction(result, right)
        return result

    def negated_atom(self, items):
        """Parse negation without parentheses: not atom(...) or \\+ atom(...)"""
        return Negation(items[-1])

    def negated_body(self, items):
        """Parse negation with parentheses: not (a(...), b(...))"""
        return Negation(items[-1])

    def typical_atom(self, items):
        """Parse atom: name or name(arg1, ..., argN)"""
        return Atom(str(items[0]), _optional_args(items, 1))

    def relational_atom(self, items):
        """
        Parse infix relational atom, e.g. X =:= Y.

        The expression is rewritten to its predicate form, e.g. equals(X, Y),
        which is then parsed as a regular atom.
        """
        left, operator, right = items
        symbol = RELATIONAL_OPERATORS[str(operator)]
        rewritten = f"{symbol}({_operand_text(left)}, {_operand_text(right)})"
        logger.debug("Rewriting infix operator '%s' as %s", operator, rewritten)
        return self._parser.parse_atom(rewritten)

    # ============ TERMS ============

    def args(self, items):
        return list(items)

    def scalar(self, items):
        """Classify identifiers, numbers and quoted literals"""
        return extract_term(items[0])

    def simple_function(self, items):
        """Parse function: foo() or foo(bar, X)"""
        return TermFunction(str(items[0]), _optional_args(items, 1))

    def valued_function(self, items):
        """Parse valued function: foo(X)=bar"""
        return TermFunction(str(items[0]), _optional_args(items, 1), [items[2]])

    def multivalued_function(self, items):
        """Parse multi-valued function: foo(X)=(bar, Y)"""
        return TermFunction(str(items[0]), _optional_args(items, 1), items[2])

    def anonymous_tuple(self, items):
        """Parse unnamed tuple: (3, 5)"""
        return TermFunction("", _optional_args(items, 0))

    def simple_list(self, items):
        """Parse list: [] or [a, b, c]"""
        return TermList(_optional_args(items, 0))

    def ht_list(self, items):
        """
        Parse head/tail list.

        [H | T] gives the list [H, T], the tail variable being kept as the last
        element. [1, 2 | [3]] is flattened to [1, 2, 3].
        """
        head, tail = items
        if isinstance(tail, TermList):
            return TermList(list(head) + list(tail.terms))
        return TermList(list(head) + [Variable(str(tail))])

    def infix_function(self, items):
        """
        Parse infix arithmetic expression, e.g. X + 1, rewritten to plus(X, 1)
        """
        left, operator, right = items
        symbol = ARITHMETIC_OPERATORS[str(operator)]
        rewritten = f"{symbol}({_operand_text(left)}, {_operand_text(right)})"
        logger.debug("Rewriting infix operator '%s' as %s", operator, rewritten)
        return self._parser.parse_function(rewritten)


class PrologParser:
    """
    Main parser class for Prolog-like logical expressions
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

        with open(self.config.resolve_grammar_path(), 'r') as f:
            grammar = f.read()

        self.parser = Lark(
            grammar,
            parser=self.config.parser,
            lexer=self.config.lexer,
            start=[start for start, _ in ENTRY_POINTS.values()],
            ambiguity=self.config.ambiguity
        )
        self.transformer = PrologTransformer(self)

    def _parse(self, text: str, entry_point: str):
        start, target = ENTRY_POINTS[entry_point]
        logger.debug("Parsing %s: %r", target, text)

        try:
            tree = self.parser.parse(text, start=start)
        except UnexpectedInput as e:
            pos = getattr(e, 'pos_in_stream', None)
            # End of input gives no position, so report the whole text
            remainder = text[pos:] if pos is not None and pos >= 0 else text
            raise GrammarError(target, remainder, reason=type(e).__name__) from e

        try:
            return self.transformer.transform(tree)
        except VisitError as e:
            # Surface errors raised while building the AST unchanged
            raise e.orig_exc from e

    def parse_term(self, text: str) -> Term:
        """Parse a single term, e.g. 'X', foo(bar)=baz or [a, b]"""
        return self._parse(text, "term")

    def parse_term_list(self, text: str) -> TermList:
        """Parse a list of terms, e.g. [a, b, c] or [H | T]"""
        return self._parse(text, "term_list")

    def parse_function(self, text: str) -> TermFunction:
        """Parse a function, e.g. foo(X), foo(X)=bar, foo(X)=(bar, Y) or (3, 5)"""
        return self._parse(text, "function")

    def parse_atom(self, text: str) -> Atom:
        """Parse an atomic formula, e.g. happensAt(walking(X), T) or X =< Y"""
        return self._parse(text, "atom")

    def parse_rule(self, text: str) -> Rule:
        """Parse a rule, e.g. p(X) :- q(X), not r(X)."""
        return self._parse(text, "rule")

    def parse_rules(self, text: str) -> List[Rule]:
        """Parse a sequence of rules"""
        return self._parse(text, "rules")

    def parse_program(self, text: str) -> List[LogicalExpression]:
        """
        Parse a knowledge base made of rules and #include "file" directives.

        Include directives are returned as IncludeFileExpression nodes and are
        not resolved.
        """
        return self._parse(text, "program")

    def parse_infix_function(self, text: str) -> TermFunction:
        """Parse an infix arithmetic expression, e.g. X + 1 gives plus(X, 1)"""
        return self._parse(text, "infix_function")


@lru_cache(maxsize=None)
def default_parser() -> PrologParser:
    """Shared parser built with the default configuration"""
    return PrologParser()


def parse_term(text: str) -> Term:
    """Convenience function to parse a single term."""
    return default_parser().parse_term(text)


def parse_term_list(text: str) -> TermList:
    """Convenience function to parse a list of terms."""
    return default_parser().parse_term_list(text)


def parse_function(text: str) -> TermFunction:
    """Convenience function to parse a function."""
    return default_parser().parse_function(text)


def parse_atom(text: str) -> Atom:
    """Convenience function to parse an atomic formula."""
    return default_parser().parse_atom(text)


def parse_rule(text: str) -> Rule:
    """Convenience function to parse a rule."""
    return default_parser().parse_rule(text)


def parse_rules(text: str) -> List[Rule]:
    """Convenience function to parse a sequence of rules."""
    return default_parser().parse_rules(text)


def parse_program(text: str) -> List[LogicalExpression]:
    """Convenience function to parse rules and include directives."""
    return default_parser().parse_program(text)


def parse_infix_function(text: str) -> TermFunction:
    """Convenience function to parse an infix arithmetic expression."""
    return default_parser().parse_infix_function(text)
