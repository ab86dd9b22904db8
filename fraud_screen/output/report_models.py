# Path: fraud_screen/output/report_models.py
"""
Report Data Models

Format-agnostic data structures for report generation.
Sections produce these models; formatters consume them.

A ScreeningOutcome becomes a ReportData holding ReportSection
instances with SectionItem rows. Formatters render them without
knowing anything about the M-Score.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SectionItem:
    """
    Single data row within a report section.

    Attributes:
        key: Machine identifier (e.g., 'dsri')
        label: Human-readable name (e.g., 'Days Sales in Receivables Index')
        value: Primary display value (number, string, etc.)
        status: Rendering hint ('ok', 'warning', 'error', 'info')
        details: Extra context (formula, sub-values, messages)
    """
    key: str
    label: str
    value: Any = None
    status: str = 'info'
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ReportSection:
    """
    A logical section of the report.

    Attributes:
        section_id: Unique identifier (e.g., 'components')
        title: Display title (e.g., 'Component Ratios')
        section_type: Rendering hint for formatters
        items: Ordered list of data rows
        metadata: Section-level context (counts, totals)
    """
    section_id: str
    title: str
    section_type: str
    items: List[SectionItem] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ReportData:
    """
    Complete report ready for formatting.

    Produced by ReportGenerator from a ScreeningOutcome.

    Attributes:
        company: Company name
        financial_year: Fiscal year of the current period, if known
        formula_variant: Formula variant used for the score
        generated_at: ISO timestamp of report generation
        sections: Ordered list of report sections
        summary: Top-level score summary
    """
    company: str
    financial_year: Optional[int] = None
    formula_variant: str = ''
    generated_at: str = ''
    sections: List[ReportSection] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def get_section(self, section_id: str) -> Optional[ReportSection]:
        """Find a section by ID."""
        for section in self.sections:
            if section.section_id == section_id:
                return section
        return None


__all__ = ['SectionItem', 'ReportSection', 'ReportData']
