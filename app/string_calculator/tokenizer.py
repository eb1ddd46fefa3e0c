"""
Tokenization

Splits body text on any delimiter of the active set.
"""

import re
from typing import Iterable, List


def build_pattern(delimiters: Iterable[str]) -> "re.Pattern[str]":
    """
    Compile one alternation that matches any delimiter literally.

    Longer delimiters come first so "**" wins over "*" when both are declared.
    """
    ordered = sorted(set(delimiters), key=len, reverse=True)
    if not ordered:
        raise ValueError("At least one delimiter is required")
    return re.compile("|".join(re.escape(d) for d in ordered))


def tokenize(body: str, delimiters: Iterable[str]) -> List[str]:
    """
    Split body into number tokens.

    Surrounding whitespace is stripped from each token and empty tokens
    are dropped, so repeated, leading or trailing delimiters are harmless.

    Args:
        body: Text with the delimiter header already removed
        delimiters: Literal separator strings

    Returns:
        Tokens in left-to-right order
    """
    pattern = build_pattern(delimiters)
    tokens = []
    for piece in pattern.split(body):
        piece = piece.strip()
        if piece:
            tokens.append(piece)
    return tokens
