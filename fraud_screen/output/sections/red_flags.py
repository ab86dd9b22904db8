# Path: fraud_screen/output/sections/red_flags.py
"""
Red Flags Section Producer

Lists the components that crossed their thresholds, in model order.
"""

from typing import List

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection

SEVERITY_STATUS = {
    'high': 'error',
    'moderate': 'warning',
    'low': 'info',
}


class RedFlagsSection(BaseSection):
    """Produces the red flag section."""

    @property
    def section_type(self) -> str:
        return 'red_flags'

    def produce(self, outcome, **kwargs) -> List[ReportSection]:
        """Build one row per red flag; the section is kept when empty."""
        items = []
        for flag in outcome.result.red_flags:
            items.append(SectionItem(
                key=flag.component,
                label=flag.component.upper(),
                value=flag.value,
                status=SEVERITY_STATUS[flag.severity.value],
                details={
                    'threshold': flag.threshold,
                    'severity': flag.severity.value,
                    'message': flag.message,
                },
            ))

        return [ReportSection(
            section_id='red_flags',
            title='Red Flags',
            section_type='red_flags',
            items=items,
            metadata={'count': len(items)},
        )]


__all__ = ['RedFlagsSection']
