# Path: fraud_screen/mscore/financial_data.py
"""
Financial Data Model

Two-period snapshot of the statement line items the M-Score needs.

Fields use `_current` (period t) and `_prior` (period t-1) suffixes.
Line items that are often missing from a filing default to zero; the
effective figures used by the engine are exposed through figures().
"""

from dataclasses import MISSING, dataclass, asdict, fields
from typing import Any, Optional

from constants import Period


@dataclass(frozen=True)
class PeriodFigures:
    """
    Effective figures for one period, as seen by the engine.

    Attributes:
        sales: Net sales / revenue
        receivables: Trade receivables plus related-party receivables
        gross_profit: Gross profit, or sales - COGS when not reported
        total_assets: Total assets
        current_assets: Total current assets
        ppe: Net PP&E plus oil and gas properties
        depreciation: Depreciation expense
        sga: SG&A expense (larger of the total and the sum of its parts)
        long_term_debt: Long-term debt
        cash: Cash and equivalents
        current_liabilities: Total current liabilities
        tax_payable: Income tax payable
    """
    sales: float
    receivables: float
    gross_profit: float
    total_assets: float
    current_assets: float
    ppe: float
    depreciation: float
    sga: float
    long_term_debt: float
    cash: float
    current_liabilities: float
    tax_payable: float


@dataclass(frozen=True)
class FinancialData:
    """
    Two-period financial data record consumed by the M-Score engine.

    Required line items have no default. Either gross_profit or cogs
    must be present for each period, and either sga_expense or its
    selling / general / admin parts. Optional items default to zero,
    which is an approximation callers should be aware of.

    Attributes:
        sales_*: Net sales
        receivables_*: Trade receivables
        total_assets_*: Total assets (non-zero)
        current_assets_*: Total current assets
        ppe_*: Net property, plant and equipment
        depreciation_*: Depreciation expense
        long_term_debt_*: Long-term debt
        operating_income_current: Operating income, current period only
        operating_cash_flow_current: Operating cash flow, current period only
        gross_profit_* / cogs_*: Gross profit, or cost of goods sold
        sga_expense_*: Total SG&A expense
        selling_expense_* / general_expense_* / admin_expense_*: SG&A parts
        cash_*: Cash and equivalents (canonical TATA only)
        current_liabilities_*: Current liabilities (canonical TATA/LVGI only)
        tax_payable_*: Income tax payable (canonical TATA only)
        receivables_related_*: Related-party receivables
        oil_and_gas_*: Oil and gas properties, added to PP&E
        company_name: Free-text company name
        financial_year: Fiscal year of the current period
    """
    # Required, both periods
    sales_current: float
    sales_prior: float
    receivables_current: float
    receivables_prior: float
    total_assets_current: float
    total_assets_prior: float
    current_assets_current: float
    current_assets_prior: float
    ppe_current: float
    ppe_prior: float
    depreciation_current: float
    depreciation_prior: float
    long_term_debt_current: float
    long_term_debt_prior: float

    # Required, current period only
    operating_income_current: float
    operating_cash_flow_current: float

    # Either-or
    gross_profit_current: Optional[float] = None
    gross_profit_prior: Optional[float] = None
    cogs_current: Optional[float] = None
    cogs_prior: Optional[float] = None
    sga_expense_current: Optional[float] = None
    sga_expense_prior: Optional[float] = None
    selling_expense_current: float = 0.0
    selling_expense_prior: float = 0.0
    general_expense_current: float = 0.0
    general_expense_prior: float = 0.0
    admin_expense_current: float = 0.0
    admin_expense_prior: float = 0.0

    # Optional, default zero
    cash_current: float = 0.0
    cash_prior: float = 0.0
    current_liabilities_current: float = 0.0
    current_liabilities_prior: float = 0.0
    tax_payable_current: float = 0.0
    tax_payable_prior: float = 0.0
    receivables_related_current: float = 0.0
    receivables_related_prior: float = 0.0
    oil_and_gas_current: float = 0.0
    oil_and_gas_prior: float = 0.0

    # Identity
    company_name: str = ''
    financial_year: Optional[int] = None

    def value(self, item: str, period: Period) -> Any:
        """
        Raw value of a line item for a period.

        Args:
            item: Line item without suffix, e.g. 'sales'
            period: Period.CURRENT or Period.PRIOR

        Raises:
            AttributeError: If the line item does not exist for the period
        """
        return getattr(self, f'{item}_{Period(period).value}')

    def figures(self, period: Period) -> PeriodFigures:
        """
        Effective figures for one period.

        Args:
            period: Period.CURRENT or Period.PRIOR

        Returns:
            PeriodFigures with derived values applied
        """
        def v(item: str) -> Any:
            return self.value(item, period)

        sales = v('sales')
        gross_profit = v('gross_profit')
        if gross_profit is None:
            cogs = v('cogs')
            gross_profit = sales - cogs if cogs is not None else 0.0

        parts = v('selling_expense') + v('general_expense') + v('admin_expense')
        sga = max(v('sga_expense') or 0.0, parts)

        return PeriodFigures(
            sales=sales,
            receivables=v('receivables') + v('receivables_related'),
            gross_profit=gross_profit,
            total_assets=v('total_assets'),
            current_assets=v('current_assets'),
            ppe=v('ppe') + v('oil_and_gas'),
            depreciation=v('depreciation'),
            sga=sga,
            long_term_debt=v('long_term_debt'),
            cash=v('cash'),
            current_liabilities=v('current_liabilities'),
            tax_payable=v('tax_payable'),
        )

    @property
    def current(self) -> PeriodFigures:
        """Effective figures for period t."""
        return self.figures(Period.CURRENT)

    @property
    def prior(self) -> PeriodFigures:
        """Effective figures for period t-1."""
        return self.figures(Period.PRIOR)

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary of all fields."""
        return asdict(self)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """All field names in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def required_field_names(cls) -> tuple[str, ...]:
        """Fields without a default value."""
        return tuple(
            f.name for f in fields(cls)
            if f.default is MISSING and f.default_factory is MISSING
        )


__all__ = ['FinancialData', 'PeriodFigures']
