"""
ReadLogic Core - Parser and AST for Prolog-like logical expressions
"""

from .parser import (
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
    extract_term,
    extract_terms,
    reformat,
)
from .ast_nodes import (
    Term,
    Variable,
    Constant,
    BooleanConstant,
    IntegerConstant,
    FloatConstant,
    StringConstant,
    TermFunction,
    TermList,
    collect_variables,
    collect_variables_lists,
    collect_constants,
    collect_constants_lists,
    collect_functions,
    collect_functions_lists,
    AtomSignature,
    Formula,
    DefiniteClauseConstruct,
    Atom,
    Conjunction,
    Negation,
    Rule,
    LogicalExpression,
    IncludeFileExpression,
)
from .config import ParserConfig
from .errors import (
    ReadLogicError,
    TermClassificationError,
    GrammarError,
    MalformedSentenceError,
    InvariantViolationError,
)

__all__ = [
    # Parser
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
    'ParserConfig',
    # Terms
    'Term',
    'Variable',
    'Constant',
    'BooleanConstant',
    'IntegerConstant',
    'FloatConstant',
    'StringConstant',
    'TermFunction',
    'TermList',
    'collect_variables',
    'collect_variables_lists',
    'collect_constants',
    'collect_constants_lists',
    'collect_functions',
    'collect_functions_lists',
    # Formulas
    'AtomSignature',
    'Formula',
    'DefiniteClauseConstruct',
    'Atom',
    'Conjunction',
    'Negation',
    'Rule',
    'LogicalExpression',
    'IncludeFileExpression',
    # Errors
    'ReadLogicError',
    'TermClassificationError',
    'GrammarError',
    'MalformedSentenceError',
    'InvariantViolationError',
]
