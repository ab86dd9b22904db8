# Path: fraud_screen/output/sections/contributions.py
"""
Contributions Section Producer

The composite score written out term by term: intercept, then
coefficient x value for each index, with the total.
"""

from typing import List

from mscore.model_parameters import BENEISH_MODEL

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection


class ContributionsSection(BaseSection):
    """Produces the score contribution table."""

    @property
    def section_type(self) -> str:
        return 'contributions'

    def produce(self, outcome, **kwargs) -> List[ReportSection]:
        """Build one row per score term."""
        result = outcome.result

        items = []
        for c in result.contributions:
            if c.component == 'intercept':
                label = 'Constant'
            else:
                label = c.component.upper()
            items.append(SectionItem(
                key=c.component,
                label=label,
                value=c.weighted,
                status='warning' if c.weighted > 0 and c.component != 'intercept' else 'info',
                details={
                    'coefficient': None if c.component == 'intercept' else c.coefficient,
                    'component_value': None if c.component == 'intercept' else c.value,
                },
            ))

        return [ReportSection(
            section_id='contributions',
            title='M-Score Calculation',
            section_type='contributions',
            items=items,
            metadata={
                'total': result.m_score,
                'intercept': BENEISH_MODEL.intercept,
            },
        )]


__all__ = ['ContributionsSection']
