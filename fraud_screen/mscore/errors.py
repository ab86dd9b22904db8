# Path: fraud_screen/mscore/errors.py
"""
M-Score Errors

Exception hierarchy for the screening engine.

MScoreError
 +-- InvalidFinancialDataError  (also ValueError)
 +-- ScoreComputationError      (also ArithmeticError)
"""

from typing import Optional


class MScoreError(Exception):
    """Base class for all fraud_screen engine errors."""


class InvalidFinancialDataError(MScoreError, ValueError):
    """
    A FinancialData record cannot be scored.

    Attributes:
        field_errors: Mapping of field name to problem description
    """

    def __init__(self, field_errors: dict[str, str], message: Optional[str] = None):
        self.field_errors = dict(field_errors)
        if message is None:
            fields = ', '.join(sorted(self.field_errors))
            message = f"Invalid financial data: {fields}"
        super().__init__(message)


class ScoreComputationError(MScoreError, ArithmeticError):
    """
    A ratio could not be computed (zero or non-finite denominator).

    Attributes:
        term: Name of the failing sub-ratio, e.g. 'dsri.prior'
        numerator: Numerator value at the point of failure
        denominator: Denominator value at the point of failure
    """

    def __init__(self, term: str, numerator: float, denominator: float):
        self.term = term
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Cannot compute {term}: {numerator!r} / {denominator!r}"
        )


__all__ = [
    'MScoreError',
    'InvalidFinancialDataError',
    'ScoreComputationError',
]
