"""
Error taxonomy for ReadLogic.

Every failure raised by the parser, the normalizer or the AST constructors
derives from ReadLogicError and carries the offending text.
"""

from typing import Optional


class ReadLogicError(Exception):
    """Base class for all ReadLogic errors."""
    pass


class TermClassificationError(ReadLogicError):
    """Raised when a text fragment matches none of the term patterns."""

    def __init__(self, fragment):
        self.fragment = fragment
        super().__init__(f"Cannot parse term symbol '{fragment}'")


class GrammarError(ReadLogicError):
    """Raised when an entry point of the grammar cannot match its input."""

    def __init__(self, target: str, remainder: str, reason: Optional[str] = None):
        self.target = target
        self.remainder = remainder
        self.reason = reason
        msg = f"Cannot parse the following expression as {target}: '{remainder}'"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedSentenceError(ReadLogicError):
    """Raised by reformat() when a sentence cannot be normalized."""

    def __init__(self, sentence: str):
        self.sentence = sentence
        super().__init__(f"The sentence '{sentence}' is invalid.")


class InvariantViolationError(ReadLogicError, ValueError):
    """Raised when an AST node is constructed with invalid parts."""
    pass
