# Path: fraud_screen/output/sections/components.py
"""
Components Section Producer

One row per Beneish index: value, the two sub-ratios it divides,
its formula, threshold and whether it raised a red flag.
"""

from typing import List

from mscore.model_parameters import BENEISH_MODEL

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection

NORMAL_MESSAGE = 'Within normal range'


class ComponentsSection(BaseSection):
    """Produces the component ratio section."""

    @property
    def section_type(self) -> str:
        return 'components'

    def produce(self, outcome, **kwargs) -> List[ReportSection]:
        """Build component rows in model order."""
        result = outcome.result
        flags = {flag.component: flag for flag in result.red_flags}

        items = []
        for spec in BENEISH_MODEL.components:
            value = getattr(result.components, spec.name)
            detail = result.detail(spec.name)
            flag = flags.get(spec.name)
            items.append(SectionItem(
                key=spec.name,
                label=spec.label,
                value=value,
                status='warning' if flag else 'ok',
                details={
                    'formula': spec.formula_for(result.formula_variant),
                    'numerator_value': detail.numerator if detail else None,
                    'denominator_value': detail.denominator if detail else None,
                    'threshold': spec.threshold,
                    'direction': spec.direction.value,
                    'flagged': flag is not None,
                    'message': flag.message if flag else NORMAL_MESSAGE,
                },
            ))

        return [ReportSection(
            section_id='components',
            title='Component Ratios',
            section_type='component_ratios',
            items=items,
            metadata={
                'formula_variant': result.formula_variant.value,
                'flagged_count': len(flags),
                'total_count': len(items),
            },
        )]


__all__ = ['ComponentsSection']
