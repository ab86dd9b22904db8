# Path: fraud_screen/output/sections/overview.py
"""
Overview Section Producer

Report header: company identification, the composite score, its risk
tier and likelihood, and a one-sentence conclusion.
"""

from typing import List

from constants import (
    RISK_DISPLAY_NAMES,
    SCORE_PLACES,
    PERCENTAGE_PLACES,
)
from mscore.model_parameters import BENEISH_MODEL

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection

# Rendering hint per risk tier
RISK_STATUS = {
    'HIGH_RISK': 'error',
    'MODERATE_RISK': 'warning',
    'LOW_RISK': 'ok',
}


def build_conclusion(company: str, m_score: float) -> str:
    """
    Conclusion sentence relative to the -1.78 manipulation cut-off.

    Args:
        company: Company name (may be empty)
        m_score: Composite score

    Returns:
        One sentence
    """
    name = company or 'The company'
    cutoff = BENEISH_MODEL.high_risk_cutoff
    score = f"{m_score:.{SCORE_PLACES}f}"
    if m_score > cutoff:
        return (
            f"Since the M-Score ({score}) is above {cutoff}, the model classifies "
            f"{name} as a likely manipulator of its financial statements."
        )
    return (
        f"Since the M-Score ({score}) is at or below {cutoff}, the model does not "
        f"classify {name} as a likely manipulator of its financial statements."
    )


class OverviewSection(BaseSection):
    """Produces the screening overview / header section."""

    @property
    def section_type(self) -> str:
        return 'overview'

    def produce(self, outcome, **kwargs) -> List[ReportSection]:
        """Build overview section from a screening outcome."""
        data = outcome.data
        result = outcome.result
        tier = result.interpretation.value

        items = [
            SectionItem(
                key='company', label='Company',
                value=data.company_name or '[unnamed]',
            ),
            SectionItem(
                key='financial_year', label='Financial Year',
                value=data.financial_year,
                details={'display': data.financial_year or 'N/A'},
            ),
            SectionItem(
                key='m_score', label='M-Score',
                value=result.m_score,
                status=RISK_STATUS[tier],
                details={'display': f"{result.m_score:.{SCORE_PLACES}f}"},
            ),
            SectionItem(
                key='interpretation', label='Risk Level',
                value=tier,
                status=RISK_STATUS[tier],
                details={'display': RISK_DISPLAY_NAMES[tier]},
            ),
            SectionItem(
                key='fraud_likelihood', label='Fraud Likelihood',
                value=result.fraud_likelihood,
                details={
                    'display': f"{result.fraud_likelihood:.{PERCENTAGE_PLACES}f}%",
                    'note': 'display heuristic, not a calibrated probability',
                },
            ),
            SectionItem(
                key='red_flag_count', label='Red Flags',
                value=len(result.red_flags),
                status='warning' if result.red_flags else 'ok',
            ),
            SectionItem(
                key='formula_variant', label='Formula Variant',
                value=result.formula_variant.value,
            ),
            SectionItem(
                key='completeness', label='Data Completeness',
                value=outcome.validation.completeness,
                details={'display': f"{outcome.validation.completeness}%"},
            ),
            SectionItem(
                key='conclusion', label='Conclusion',
                value=build_conclusion(data.company_name, result.m_score),
            ),
        ]

        section = ReportSection(
            section_id='overview',
            title='Screening Overview',
            section_type='overview',
            items=items,
            metadata={
                'screened_at': outcome.screened_at,
                'warnings': list(outcome.validation.warnings),
            },
        )
        return [section]


__all__ = ['OverviewSection', 'build_conclusion']
