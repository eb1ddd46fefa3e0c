"""
Delimiter Resolution

Reads the optional header at the start of the input:

    //;\n1;2;3              one custom delimiter
    //[***]\n1***2***3      bracketed delimiter of any length
    //[*][%]\n1*2%3         several bracketed delimiters

Delimiters are literal text. Nothing here is a pattern.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

HEADER_PREFIX = "//"
NEWLINE = "\n"
DEFAULT_DELIMITERS: Tuple[str, ...] = (",", NEWLINE)


@dataclass(frozen=True)
class ParsedInput:
    """Active delimiter set plus the text left to tokenize."""
    delimiters: Tuple[str, ...]
    body: str


def parse_declaration(declaration: str) -> Tuple[str, ...]:
    """
    Turn the text between "//" and the first newline into delimiters.

    Args:
        declaration: Header text, e.g. ";" or "[*][%]"

    Returns:
        Declared delimiters in order, without duplicates. Empty if
        the header declares nothing usable.
    """
    if len(declaration) >= 2 and declaration.startswith("[") and declaration.endswith("]"):
        candidates = declaration[1:-1].split("][")
    else:
        candidates = [declaration]

    declared = []
    for candidate in candidates:
        if candidate and candidate not in declared:
            declared.append(candidate)
    return tuple(declared)


def resolve_delimiters(text: str) -> ParsedInput:
    """
    Find the delimiter set and body for an (already trimmed) input.

    Without a header the defaults apply: comma and newline.
    With a header, the declared delimiters replace the comma but a
    newline always keeps separating numbers.

    Args:
        text: Trimmed calculator input

    Returns:
        ParsedInput with the delimiters and the body text
    """
    if not text.startswith(HEADER_PREFIX):
        return ParsedInput(DEFAULT_DELIMITERS, text)

    end = text.find(NEWLINE)
    if end == -1:
        # "//" with no newline is not a header; the body fails to parse later
        return ParsedInput(DEFAULT_DELIMITERS, text)

    declared = parse_declaration(text[len(HEADER_PREFIX):end])
    body = text[end + 1:]

    if not declared:
        logger.debug("Empty delimiter header, using defaults")
        return ParsedInput(DEFAULT_DELIMITERS, body)

    delimiters = declared if NEWLINE in declared else declared + (NEWLINE,)
    logger.debug(f"Custom delimiters: {list(delimiters)}")
    return ParsedInput(delimiters, body)
