"""
Calculator Errors

Every failure raised by the package derives from CalculatorError,
which is itself a ValueError so callers can treat bad input uniformly.
"""

from typing import List


class CalculatorError(ValueError):
    """Base exception for string calculator errors."""

    kind = "CalculatorError"


class NegativeNumbersError(CalculatorError):
    """
    Raised when one or more tokens are negative.

    All offending tokens are kept, in the order they appeared,
    with their original text (sign and digits untouched).
    """

    kind = "NegativeNumbersNotAllowed"

    def __init__(self, negatives: List[str]):
        self.negatives = list(negatives)
        super().__init__("Negatives not allowed: " + ",".join(self.negatives))


class MalformedNumberError(CalculatorError):
    """Raised when a token is not a signed decimal integer."""

    kind = "MalformedNumber"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid number: {token!r}")


class ConfigError(CalculatorError):
    """Raised when configuration values fail validation."""

    kind = "ConfigError"
