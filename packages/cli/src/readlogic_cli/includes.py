"""
Loading of knowledge base files and resolution of #include directives
"""

import logging
from pathlib import Path
from typing import List, Optional, Set

from readlogic_core import IncludeFileExpression, Rule, parse_program, reformat

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("%", "//")


def split_sentences(text: str) -> List[str]:
    """
    Split free-form knowledge base text into sentences.

    A sentence ends on a line ending with '.'; include directives and comment
    lines stand on their own.
    """
    sentences = []
    current: List[str] = []

    for line in text.splitlines():
        stripped = line.strip()
        if not current and (not stripped or stripped.startswith(_COMMENT_PREFIXES)):
            continue
        if not current and stripped.startswith("#include"):
            sentences.append(stripped)
            continue

        current.append(line)
        if stripped.endswith("."):
            sentences.append("\n".join(current))
            current = []

    if current and "".join(current).strip():
        sentences.append("\n".join(current))

    return sentences


def normalize_text(text: str) -> str:
    """Run every rule of a knowledge base through reformat()"""
    normalized = []
    for sentence in split_sentences(text):
        if sentence.startswith("#include"):
            normalized.append(sentence)
        else:
            normalized.append(reformat(sentence))
    return "\n".join(normalized)


def load_knowledge_base(filepath: str, normalize: bool = False,
                        _included: Optional[Set[Path]] = None) -> List[Rule]:
    """
    Parse a knowledge base file and return its rules.

    Include directives are resolved relative to the including file, and the
    rules of included files come before the rules of the including file.
    Files already loaded are skipped, so include cycles are harmless.

    Raises:
        FileNotFoundError: If the file or one of its includes does not exist
        ReadLogicError: If a file cannot be parsed
    """
    filepath = Path(filepath).resolve()

    if _included is None:
        _included = set()

    if filepath in _included:
        logger.debug("Skipping %s (already included)", filepath)
        return []

    _included.add(filepath)

    with open(filepath, 'r') as f:
        text = f.read()

    if normalize:
        text = normalize_text(text)

    logger.debug("Parsing knowledge base %s", filepath)
    expressions = parse_program(text)

    includes = [e for e in expressions if isinstance(e, IncludeFileExpression)]
    rules = [e for e in expressions if isinstance(e, Rule)]

    merged: List[Rule] = []
    for include in includes:
        include_path = filepath.parent / include.filename
        if not include_path.exists():
            raise FileNotFoundError(f"Cannot find include '{include.filename}' at {include_path}")
        logger.debug("Including %s from %s", include_path, filepath)
        merged.extend(load_knowledge_base(str(include_path), normalize, _included))

    merged.extend(rules)
    return merged
