"""
AST Node Classes for ReadLogic
"""

from .terms import (
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
)
from .signature import AtomSignature
from .formulas import Formula, DefiniteClauseConstruct, Atom, Conjunction, Negation, Rule
from .declarations import LogicalExpression, IncludeFileExpression

__all__ = [
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
    'AtomSignature',
    'Formula',
    'DefiniteClauseConstruct',
    'Atom',
    'Conjunction',
    'Negation',
    'Rule',
    'LogicalExpression',
    'IncludeFileExpression',
]
