"""
AST nodes for logical expressions that are not formulas
"""

from dataclasses import dataclass


class LogicalExpression:
    """Marker base for everything a knowledge base may contain."""
    pass


@dataclass(frozen=True)
class IncludeFileExpression(LogicalExpression):
    """
    Represents a file inclusion directive
    Example: #include "definitions.pl"

    The directive is only data. Reading the file is left to the caller.
    """
    filename: str

    def to_text(self) -> str:
        return f'#include "{self.filename}"'

    def __repr__(self):
        return f"IncludeFileExpression({self.filename})"
