"""
Text normalization of free-form rules, applied before parsing.

reformat() joins a rule body written across several lines into a single
line and rewrites alternate spellings into the form the grammar expects:

    holdsFor(F, [H | T]) :-
        holdsAt(F, H),
        \\+ (happensAt(a, H), happensAt(b, T)).

becomes

    holdsFor(F, [H, T]) :- holdsAt(F, H), not(happensAt(a, H), happensAt(b, T)).

The list bar is treated as a plain separator here, so [H | T] becomes [H, T].
The grammar has its own head/tail list production for text that does not go
through reformat().
"""

import re
from typing import List

from ..errors import MalformedSentenceError

RULE_SEPARATOR = ":-"

# A comma at the end of a line separates two body literals
_SEGMENT_SEPARATOR = re.compile(r",[ ]*\n")

# Leading blanks followed by '|' at the start of a line
_MARGIN = re.compile(r"^[ \t]*\|", re.MULTILINE)

_LIST_BAR = re.compile(r"[ ]*\|[ ]*")

# not (...), \+ (...), \+(...)
_NEGATION_PARENTHESIS = re.compile(r"(?<!\w)(?:not|\\\+)[ ]*\(")

# not atom(...), \+ atom(...)
_NEGATION_BARE = re.compile(r"(?<!\w)(?:not|\\\+)[ ]+(?=[^\s(])")


def _strip_margin(text: str) -> str:
    return _MARGIN.sub("", text)


def _literal_end(text: str, start: int) -> int:
    """Index of the first top-level ',' or unmatched closing bracket after start"""
    depth = 0
    for i in range(start, len(text)):
        c = text[i]
        if c in "([":
            depth += 1
        elif c in ")]":
            if depth == 0:
                return i
            depth -= 1
        elif c == "," and depth == 0:
            return i
    return len(text)


def _wrap_bare_negations(segment: str) -> str:
    match = _NEGATION_BARE.search(segment)
    while match is not None:
        end = _literal_end(segment, match.end())
        literal = segment[match.end():end].rstrip()
        segment = segment[:match.start()] + f"not({literal})" + segment[end:]
        match = _NEGATION_BARE.search(segment)
    return segment


def _cleanup(body: str) -> List[str]:
    segments = []
    for segment in _SEGMENT_SEPARATOR.split(_strip_margin(body)):
        segment = segment.strip()
        if not segment:
            continue
        segment = segment.removesuffix(".")
        segment = _LIST_BAR.sub(", ", segment)
        segment = _NEGATION_PARENTHESIS.sub("not(", segment)
        segment = _wrap_bare_negations(segment)
        segments.append(segment)
    return segments


def _rewrite(body: str, sentence: str, multiline: bool) -> str:
    segments = _cleanup(body)
    if not segments:
        raise MalformedSentenceError(sentence)

    if multiline and len(segments) > 1:
        return "\n\t" + ",\n\t".join(segments)
    return ", ".join(segments)


def reformat(sentence: str, multiline: bool = False) -> str:
    """
    Normalize a rule (or a rule body) into the canonical single-line form.

    Args:
        sentence: Rule text, possibly spanning several lines
        multiline: Put each body literal on its own tab-indented line

    Returns:
        The normalized text, always ending with a single '.'

    Raises:
        MalformedSentenceError: If the sentence has more than one ':-' or
            nothing but blanks on one side of it
    """
    parts = sentence.split(RULE_SEPARATOR)

    if len(parts) == 1:
        return _rewrite(sentence, sentence, multiline) + "."
    if len(parts) == 2:
        head, body = parts
        return (_rewrite(head.strip(), sentence, multiline) + f" {RULE_SEPARATOR} "
                + _rewrite(body, sentence, multiline) + ".")

    raise MalformedSentenceError(sentence)
