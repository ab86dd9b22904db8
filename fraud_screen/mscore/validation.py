# Path: fraud_screen/mscore/validation.py
"""
Financial Data Validation

Checks a FinancialData record before scoring.

Errors make a record unscoreable and are reported per field:
- divisor fields (sales, total assets, both periods) equal to zero
- non-numeric or non-finite values
- negative monetary values (income, cash flow and gross profit excepted)
- a financial year that is not four digits

Warnings do not block scoring but are surfaced to the user:
- gross profit and COGS both missing for a period
- key line items left at zero
- canonical variant without current liabilities
"""

import math
from dataclasses import dataclass, field
from typing import Any

from constants import FormulaVariant, Period

from .errors import InvalidFinancialDataError
from .financial_data import FinancialData


# ==============================================================================
# FIELD GROUPS
# ==============================================================================

DIVISOR_FIELDS: tuple[str, ...] = (
    'sales_current',
    'sales_prior',
    'total_assets_current',
    'total_assets_prior',
)

# May legitimately be negative
SIGNED_FIELDS: frozenset[str] = frozenset({
    'operating_income_current',
    'operating_cash_flow_current',
    'gross_profit_current',
    'gross_profit_prior',
})

# Line items counted for completeness and "please fill" warnings
KEY_ITEMS: tuple[str, ...] = (
    'sales',
    'gross_profit',
    'receivables',
    'total_assets',
    'current_assets',
    'ppe',
    'depreciation',
    'sga',
    'long_term_debt',
)
KEY_CURRENT_ONLY: tuple[str, ...] = (
    'operating_income_current',
    'operating_cash_flow_current',
)

_NON_NUMERIC_FIELDS = frozenset({'company_name', 'financial_year'})


@dataclass
class ValidationReport:
    """
    Outcome of validating one record.

    Attributes:
        errors: Field name -> problem, blocking
        warnings: Human-readable notes, non-blocking
        completeness: Percentage (0-100) of key items filled
    """
    errors: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    completeness: int = 0

    @property
    def is_valid(self) -> bool:
        """True when there are no errors."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            'is_valid': self.is_valid,
            'errors': dict(self.errors),
            'warnings': list(self.warnings),
            'completeness': self.completeness,
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_numbers(data: FinancialData, errors: dict[str, str]) -> None:
    """Type, finiteness and sign checks for every monetary field."""
    for name in FinancialData.field_names():
        if name in _NON_NUMERIC_FIELDS:
            continue
        value = getattr(data, name)
        if value is None:
            continue
        if not _is_number(value):
            errors[name] = f"must be a number, got {type(value).__name__}"
        elif not math.isfinite(value):
            errors[name] = "must be a finite number"
        elif value < 0 and name not in SIGNED_FIELDS:
            errors[name] = "must not be negative"


def _check_divisors(data: FinancialData, errors: dict[str, str]) -> None:
    for name in DIVISOR_FIELDS:
        if name not in errors and getattr(data, name) == 0:
            errors[name] = "must be non-zero"


def _check_year(data: FinancialData, errors: dict[str, str]) -> None:
    year = data.financial_year
    if year is None:
        return
    if not isinstance(year, int) or isinstance(year, bool) or not 1000 <= year <= 9999:
        errors['financial_year'] = "must be a 4-digit year"


def _key_values(data: FinancialData) -> dict[str, Any]:
    """
    Key items by display name.

    Gross profit falls back to COGS and SG&A to its parts; the values are
    only used to decide whether an item was filled in.
    """
    values: dict[str, Any] = {}
    for period in Period:
        for item in KEY_ITEMS:
            value = data.value(item if item != 'sga' else 'sga_expense', period)
            if item == 'gross_profit' and value is None:
                value = data.value('cogs', period)
            elif item == 'sga' and not value:
                value = (
                    data.value('selling_expense', period)
                    or data.value('general_expense', period)
                    or data.value('admin_expense', period)
                )
            values[f'{item}_{period.value}'] = value
    for name in KEY_CURRENT_ONLY:
        values[name] = getattr(data, name)
    return values


def validate_financial_data(
    data: FinancialData,
    variant: FormulaVariant = FormulaVariant.SIMPLIFIED,
) -> ValidationReport:
    """
    Validate a record without raising.

    Args:
        data: Record to check
        variant: Formula variant the record will be scored with

    Returns:
        ValidationReport
    """
    report = ValidationReport()

    _check_numbers(data, report.errors)
    _check_divisors(data, report.errors)
    _check_year(data, report.errors)

    for name, value in _key_values(data).items():
        if name in DIVISOR_FIELDS or name in report.errors or value:
            continue
        if value is None and name.startswith('gross_profit_'):
            suffix = name.rsplit('_', 1)[1]
            report.warnings.append(
                f"{name} and cogs_{suffix} are both missing"
                f" - gross profit taken as 0"
            )
        else:
            report.warnings.append(f"{name} is missing - please fill manually")

    if FormulaVariant(variant) == FormulaVariant.CANONICAL:
        if not data.current_liabilities_current and not data.current_liabilities_prior:
            report.warnings.append(
                "current_liabilities is missing - canonical TATA and LVGI"
                " treat it as 0"
            )

    report.completeness = completeness(data)
    return report


def completeness(data: FinancialData) -> int:
    """
    Percentage of key items (plus company name and year) that are filled.

    Zero counts as not filled, since optional items default to zero.
    """
    filled = [bool(data.company_name), data.financial_year is not None]
    for value in _key_values(data).values():
        filled.append(_is_number(value) and value != 0)
    return round(sum(filled) / len(filled) * 100)


def require_scoreable(
    data: FinancialData,
    variant: FormulaVariant = FormulaVariant.SIMPLIFIED,
) -> ValidationReport:
    """
    Validate a record and raise if it cannot be scored.

    Args:
        data: Record to check
        variant: Formula variant the record will be scored with

    Returns:
        ValidationReport (only warnings) when the record is scoreable

    Raises:
        InvalidFinancialDataError: With field_errors for every problem
    """
    report = validate_financial_data(data, variant)
    if not report.is_valid:
        raise InvalidFinancialDataError(report.errors)
    return report


__all__ = [
    'ValidationReport',
    'validate_financial_data',
    'require_scoreable',
    'completeness',
    'DIVISOR_FIELDS',
    'SIGNED_FIELDS',
]
