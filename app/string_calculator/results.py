"""
Calculation Result

Non-raising counterpart of add(): every call returns one of these.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import CalculatorError


@dataclass(frozen=True)
class CalculationResult:
    """
    Outcome of a single calculation.

    - Did it work? (success)
    - What is the sum? (total, only on success)
    - What went wrong? (error and error_kind, only on failure)
    """
    success: bool
    total: Optional[int] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def __str__(self) -> str:
        if self.success:
            return str(self.total)
        return f"Error: {self.error}"

    @classmethod
    def ok(cls, total: int) -> "CalculationResult":
        """Create a successful result."""
        return cls(success=True, total=total)

    @classmethod
    def fail(cls, error: CalculatorError) -> "CalculationResult":
        """Create a failed result from a calculator error."""
        return cls(success=False, error=str(error), error_kind=error.kind)

    def unwrap(self) -> int:
        """Return the total, or raise ValueError for a failed result."""
        if not self.success:
            raise ValueError(self.error)
        return self.total
