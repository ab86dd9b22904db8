# Path: fraud_screen/output/formatters/json_formatter.py
"""
JSON Formatter

Renders ReportData as structured JSON, preserving every section and
item detail for downstream tools.
"""

import json
from typing import Any, Dict

from ..report_models import ReportData, ReportSection, SectionItem
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders report as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    @property
    def format_name(self) -> str:
        return 'json'

    @property
    def file_extension(self) -> str:
        return '.json'

    def format_report(self, report: ReportData) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self._serialize_report(report), indent=self.indent, default=str)

    def _serialize_report(self, report: ReportData) -> Dict[str, Any]:
        return {
            'company': report.company,
            'financial_year': report.financial_year,
            'formula_variant': report.formula_variant,
            'generated_at': report.generated_at,
            'summary': report.summary,
            'sections': [self._serialize_section(s) for s in report.sections],
        }

    def _serialize_section(self, section: ReportSection) -> Dict[str, Any]:
        return {
            'section_id': section.section_id,
            'title': section.title,
            'section_type': section.section_type,
            'metadata': section.metadata,
            'items': [self._serialize_item(item) for item in section.items],
        }

    def _serialize_item(self, item: SectionItem) -> Dict[str, Any]:
        return {
            'key': item.key,
            'label': item.label,
            'value': item.value,
            'status': item.status,
            'details': item.details,
        }


__all__ = ['JsonFormatter']
