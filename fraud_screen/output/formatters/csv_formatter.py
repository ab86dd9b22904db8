# Path: fraud_screen/output/formatters/csv_formatter.py
"""
CSV Formatter

Renders ReportData as CSV for spreadsheet import. One row per item,
tagged with its section; report metadata comes first.
"""

import csv
import io

from constants import RATIO_PLACES

from ..report_models import ReportData, ReportSection
from .base_formatter import BaseFormatter

COLUMNS = [
    'section', 'key', 'label', 'value', 'status',
    'formula', 'numerator_value', 'denominator_value',
    'threshold', 'message',
]


class CsvFormatter(BaseFormatter):
    """Renders report as CSV."""

    @property
    def format_name(self) -> str:
        return 'csv'

    @property
    def file_extension(self) -> str:
        return '.csv'

    def format_report(self, report: ReportData) -> str:
        """Render report as CSV string."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator='\n')
        writer.writerow(COLUMNS)

        metadata = [
            ('company', report.company),
            ('financial_year', report.financial_year),
            ('formula_variant', report.formula_variant),
            ('generated_at', report.generated_at),
        ]
        for key, value in metadata:
            writer.writerow(
                ['metadata', key, '', self._format_value(value)]
                + [''] * (len(COLUMNS) - 4)
            )

        for section in report.sections:
            self._write_section(writer, section)

        return output.getvalue()

    def _write_section(self, writer, section: ReportSection) -> None:
        """Write one section's items as CSV rows."""
        for item in section.items:
            d = item.details
            writer.writerow([
                section.section_id,
                item.key,
                item.label,
                self._format_value(item.value),
                item.status,
                d.get('formula', ''),
                self._format_value(d.get('numerator_value')),
                self._format_value(d.get('denominator_value')),
                self._format_value(d.get('threshold')),
                d.get('message', ''),
            ])

    def _format_value(self, value) -> str:
        """Format a value for CSV output."""
        if value is None:
            return ''
        if isinstance(value, float):
            if abs(value) >= 1000:
                return f"{value:.0f}"
            return f"{value:.{RATIO_PLACES}f}"
        return str(value)


__all__ = ['CsvFormatter']
