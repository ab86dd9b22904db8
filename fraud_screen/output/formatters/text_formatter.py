# Path: fraud_screen/output/formatters/text_formatter.py
"""
Text Formatter

Renders ReportData as ASCII text suitable for console display
and plain-text file output.
"""

from constants import (
    RATIO_PLACES,
    SCORE_PLACES,
    STATUS_OK,
    STATUS_WARN,
    STATUS_FAIL,
    STATUS_INFO,
)

from ..report_models import ReportData, ReportSection, SectionItem
from .base_formatter import BaseFormatter

LINE_WIDTH = 70
DIVIDER = '=' * LINE_WIDTH
SUB_DIVIDER = '-' * LINE_WIDTH

STATUS_TAGS = {
    'ok': STATUS_OK,
    'warning': STATUS_WARN,
    'error': STATUS_FAIL,
    'info': STATUS_INFO,
}


def _amount(value) -> str:
    if value is None:
        return '-'
    return f"{value:,.0f}"


class TextFormatter(BaseFormatter):
    """Renders report as ASCII text."""

    @property
    def format_name(self) -> str:
        return 'text'

    @property
    def file_extension(self) -> str:
        return '.txt'

    def format_report(self, report: ReportData) -> str:
        """Render full report as text."""
        lines = [
            '',
            DIVIDER,
            f"  BENEISH M-SCORE SCREENING: {report.company or '[unnamed]'}",
            f"  Financial year {report.financial_year or 'N/A'} | "
            f"{report.formula_variant} formulas",
            DIVIDER,
        ]

        for section in report.sections:
            lines.extend(self._render_section(section))

        lines.append('')
        lines.append(DIVIDER)
        if report.generated_at:
            lines.append(f"  Generated: {report.generated_at}")
        lines.append('')
        return '\n'.join(lines)

    def _render_section(self, section: ReportSection) -> list[str]:
        """Dispatch to type-specific renderer."""
        renderers = {
            'overview': self._render_overview,
            'input_table': self._render_input_table,
            'component_ratios': self._render_components,
            'contributions': self._render_contributions,
            'red_flags': self._render_red_flags,
        }
        renderer = renderers.get(section.section_type, self._render_generic)
        return self._header(section) + renderer(section)

    def _header(self, section: ReportSection) -> list[str]:
        return ['', f"  {section.title.upper()}:", SUB_DIVIDER]

    def _render_overview(self, section: ReportSection) -> list[str]:
        lines = []
        conclusion = None
        for item in section.items:
            if item.key == 'conclusion':
                conclusion = item.value
                continue
            display = item.details.get('display', item.value)
            lines.append(f"    {item.label:25s}  {display}")

        for warning in section.metadata.get('warnings', []):
            lines.append(f"    {STATUS_WARN} {warning}")

        if conclusion:
            lines.append('')
            lines.append(f"    {conclusion}")
        return lines

    def _render_input_table(self, section: ReportSection) -> list[str]:
        lines = [f"    {'Line item':30s} {'Current':>16s} {'Prior':>16s}"]
        for item in section.items:
            d = item.details
            lines.append(
                f"    {item.label:30s} {_amount(d.get('current')):>16s} "
                f"{_amount(d.get('prior')):>16s}"
            )
        return lines

    def _render_components(self, section: ReportSection) -> list[str]:
        lines = []
        for item in section.items:
            d = item.details
            tag = STATUS_TAGS.get(item.status, STATUS_INFO)
            lines.append(
                f"    {tag:6s} {item.key.upper():5s} = {item.value:10.{SCORE_PLACES}f}"
                f"   {item.label}"
            )
            lines.append(f"           {d.get('formula', '')}")
            num = d.get('numerator_value')
            den = d.get('denominator_value')
            if num is not None and den is not None:
                if item.key in ('sgi', 'tata'):
                    lines.append(f"           = {_amount(num)} / {_amount(den)}")
                else:
                    lines.append(
                        f"           = {num:.{RATIO_PLACES}f} / {den:.{RATIO_PLACES}f}"
                    )
            lines.append(f"           {d.get('message', '')}")

        meta = section.metadata
        lines.append(
            f"    ({meta.get('flagged_count', 0)}/{meta.get('total_count', 0)} flagged)"
        )
        return lines

    def _render_contributions(self, section: ReportSection) -> list[str]:
        lines = [f"    {'Component':10s} {'Coefficient':>12s} {'Value':>12s} {'Contribution':>14s}"]
        for item in section.items:
            d = item.details
            coef = d.get('coefficient')
            val = d.get('component_value')
            coef_s = f"{coef:.3f}" if coef is not None else '-'
            val_s = f"{val:.{RATIO_PLACES}f}" if val is not None else '-'
            lines.append(
                f"    {item.label:10s} {coef_s:>12s} {val_s:>12s} {item.value:>+14.3f}"
            )
        lines.append(f"    {'M-Score total':36s} {section.metadata.get('total', 0):>14.3f}")
        return lines

    def _render_red_flags(self, section: ReportSection) -> list[str]:
        if not section.items:
            return [f"    {STATUS_OK} No red flags"]
        lines = []
        for item in section.items:
            d = item.details
            tag = STATUS_TAGS.get(item.status, STATUS_INFO)
            lines.append(
                f"    {tag:6s} {item.label:5s} {item.value:.{SCORE_PLACES}f} "
                f"(threshold {d.get('threshold')}, {d.get('severity')})"
            )
            lines.append(f"           {d.get('message', '')}")
        return lines

    def _render_generic(self, section: ReportSection) -> list[str]:
        """Fallback renderer for unknown section types."""
        lines = []
        for item in section.items:
            tag = STATUS_TAGS.get(item.status, STATUS_INFO)
            if item.value is not None:
                lines.append(f"    {tag:6s} {item.label:30s}  {item.value}")
            else:
                lines.append(f"    {tag:6s} {item.label}")
        return lines


__all__ = ['TextFormatter']
