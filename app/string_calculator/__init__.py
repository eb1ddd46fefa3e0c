"""
String Calculator - sums numbers held in a delimited string

This package contains:
- calculator: add(), try_add() and the StringCalculator facade
- delimiters: "//...\\n" header parsing
- tokenizer: splitting on literal delimiters
- errors: exception hierarchy
- config: configuration loading
"""

from .calculator import StringCalculator, add, try_add
from .config import Config
from .delimiters import ParsedInput, resolve_delimiters
from .errors import CalculatorError, MalformedNumberError, NegativeNumbersError
from .results import CalculationResult
from .tokenizer import tokenize

__version__ = "0.1.0"
__all__ = [
    "StringCalculator",
    "add",
    "try_add",
    "Config",
    "ParsedInput",
    "resolve_delimiters",
    "tokenize",
    "CalculatorError",
    "MalformedNumberError",
    "NegativeNumbersError",
    "CalculationResult",
]
