# Path: fraud_screen/output/sections/input_data.py
"""
Input Data Section Producer

Table of the line items that went into the score, current and prior
period side by side, with the effective figures the engine used.
"""

from typing import List

from constants import Period

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection

# (stem, label, effective figure attribute or None)
INPUT_ROWS = [
    ('sales', 'Sales', 'sales'),
    ('gross_profit', 'Gross Profit', 'gross_profit'),
    ('cogs', 'Cost of Goods Sold', None),
    ('receivables', 'Receivables', 'receivables'),
    ('receivables_related', 'Related-Party Receivables', None),
    ('total_assets', 'Total Assets', 'total_assets'),
    ('current_assets', 'Current Assets', 'current_assets'),
    ('cash', 'Cash', 'cash'),
    ('ppe', 'PP&E', 'ppe'),
    ('oil_and_gas', 'Oil and Gas Properties', None),
    ('depreciation', 'Depreciation', 'depreciation'),
    ('sga_expense', 'SG&A Expense', 'sga'),
    ('current_liabilities', 'Current Liabilities', 'current_liabilities'),
    ('tax_payable', 'Tax Payable', 'tax_payable'),
    ('long_term_debt', 'Long-Term Debt', 'long_term_debt'),
]

CURRENT_ONLY_ROWS = [
    ('operating_income_current', 'Operating Income'),
    ('operating_cash_flow_current', 'Operating Cash Flow'),
]


class InputDataSection(BaseSection):
    """Produces the input data table."""

    @property
    def section_type(self) -> str:
        return 'input_data'

    def produce(self, outcome, **kwargs) -> List[ReportSection]:
        """Build one row per line item."""
        data = outcome.data
        current = data.figures(Period.CURRENT)
        prior = data.figures(Period.PRIOR)

        items = []
        for stem, label, effective in INPUT_ROWS:
            cur = data.value(stem, Period.CURRENT)
            pri = data.value(stem, Period.PRIOR)
            details = {'current': cur, 'prior': pri}
            if effective is not None:
                details['effective_current'] = getattr(current, effective)
                details['effective_prior'] = getattr(prior, effective)
            items.append(SectionItem(
                key=stem, label=label, value=cur, details=details,
            ))

        for name, label in CURRENT_ONLY_ROWS:
            value = getattr(data, name)
            items.append(SectionItem(
                key=name, label=label, value=value,
                details={'current': value, 'prior': None},
            ))

        return [ReportSection(
            section_id='input_data',
            title='Input Data',
            section_type='input_table',
            items=items,
            metadata={'count': len(items)},
        )]


__all__ = ['InputDataSection']
