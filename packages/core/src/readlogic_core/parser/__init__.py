"""
ReadLogic Parser
"""

from .prolog_parser import (
    PrologParser,
    default_parser,
    parse_term,
    parse_term_list,
    parse_function,
    parse_atom,
    parse_rule,
    parse_rules,
    parse_program,
    parse_infix_function,
)
from .extraction import extract_term, extract_terms
from .reformat import reformat

__all__ = [
    'PrologParser',
    'default_parser',
    'parse_term',
    'parse_term_list',
    'parse_function',
    'parse_atom',
    'parse_rule',
    'parse_rules',
    'parse_program',
    'parse_infix_function',
    'extract_term',
    'extract_terms',
    'reformat',
]
