"""
Parser Configuration
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_GRAMMAR_PATH = Path(__file__).parent / "grammar" / "prolog.lark"


@dataclass
class ParserConfig:
    """Configuration for PrologParser"""

    # Grammar file, defaults to the bundled grammar/prolog.lark
    grammar_path: Optional[str] = None

    # Lark settings
    parser: str = "earley"
    lexer: str = "dynamic"
    ambiguity: str = "resolve"

    def resolve_grammar_path(self) -> Path:
        if self.grammar_path is None:
            return DEFAULT_GRAMMAR_PATH
        return Path(self.grammar_path)
