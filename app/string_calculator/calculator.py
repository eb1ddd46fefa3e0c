"""
String Calculator

add("1,2\n3") -> 6

The input runs through three steps, in order:
1. resolve_delimiters: read the optional "//...\n" header
2. tokenize: split the body on the active delimiters
3. aggregate: reject negatives, then sum with the upper limit

No state is kept between calls, so calls may run from any thread.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .config import Config
from .delimiters import resolve_delimiters
from .errors import CalculatorError, MalformedNumberError, NegativeNumbersError
from .results import CalculationResult
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

UPPER_LIMIT = 1000

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_number(token: str) -> int:
    """
    Parse a token as a signed decimal integer.

    Raises:
        MalformedNumberError: If the token is anything else
    """
    if not _INTEGER.fullmatch(token):
        logger.info(f"Rejected malformed token: {token!r}")
        raise MalformedNumberError(token)
    return int(token)


def aggregate(tokens: List[str], upper_limit: int = UPPER_LIMIT) -> int:
    """
    Sum the tokens.

    Values greater than upper_limit count as zero.

    Args:
        tokens: Number tokens in input order
        upper_limit: Largest value that still counts

    Returns:
        The sum (0 for no tokens)

    Raises:
        MalformedNumberError: If a token is not an integer
        NegativeNumbersError: If any token is negative; lists all of them
    """
    values = [parse_number(token) for token in tokens]

    negatives = [token for token, value in zip(tokens, values) if value < 0]
    if negatives:
        logger.info(f"Rejected {len(negatives)} negative number(s)")
        raise NegativeNumbersError(negatives)

    return sum(value for value in values if value <= upper_limit)


def add(numbers: Optional[str], upper_limit: int = UPPER_LIMIT) -> int:
    """
    Add the numbers contained in a delimited string.

    Args:
        numbers: Input such as "1,2", "1\\n2,3" or "//[***]\\n1***2"
        upper_limit: Largest value that still counts (default 1000)

    Returns:
        Sum of the numbers; 0 for empty or whitespace-only input

    Raises:
        NegativeNumbersError: "Negatives not allowed: -1,-2"
        MalformedNumberError: A token is not an integer
    """
    text = (numbers or "").strip()
    if not text:
        return 0

    parsed = resolve_delimiters(text)
    tokens = tokenize(parsed.body, parsed.delimiters)
    return aggregate(tokens, upper_limit)


def try_add(numbers: Optional[str], upper_limit: int = UPPER_LIMIT) -> CalculationResult:
    """Like add(), but returns a CalculationResult instead of raising."""
    try:
        return CalculationResult.ok(add(numbers, upper_limit))
    except CalculatorError as e:
        return CalculationResult.fail(e)


@dataclass(frozen=True)
class StringCalculator:
    """
    Calculator bound to one upper limit.

    Usage:
        calculator = StringCalculator()
        calculator.add("//;\\n1;2")  # 3
    """
    upper_limit: int = UPPER_LIMIT

    @classmethod
    def from_config(cls, config: Config) -> "StringCalculator":
        return cls(upper_limit=config.upper_limit)

    def add(self, numbers: Optional[str]) -> int:
        return add(numbers, self.upper_limit)

    def try_add(self, numbers: Optional[str]) -> CalculationResult:
        return try_add(numbers, self.upper_limit)
