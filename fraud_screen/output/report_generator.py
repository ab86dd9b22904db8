# Path: fraud_screen/output/report_generator.py
"""
Report Generator

Converts a ScreeningOutcome into ReportData via registered section
producers, then renders or writes it via registered formatters.

Architecture:
    ScreeningOutcome  ->  [Section Producers]  ->  ReportData  ->  [Formatters]  ->  Files

Usage:
    from output import ReportGenerator

    generator = ReportGenerator(config)
    report = generator.generate(outcome)
    paths = generator.write(report)
    print(generator.to_console(report))
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from config_loader import ConfigLoader
from constants import OutputFormat
from core.logger.ipo_logging import get_output_logger

from .report_models import ReportData
from .sections import (
    SectionRegistry,
    OverviewSection,
    InputDataSection,
    ComponentsSection,
    ContributionsSection,
    RedFlagsSection,
)
from .formatters import (
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
    CsvFormatter,
)


def _register_defaults() -> None:
    """Register built-in section producers and formatters."""
    # Section producers (order matters for report layout)
    SectionRegistry.register(OverviewSection)
    SectionRegistry.register(InputDataSection)
    SectionRegistry.register(ComponentsSection)
    SectionRegistry.register(ContributionsSection)
    SectionRegistry.register(RedFlagsSection)

    # Formatters
    FormatterRegistry.register(TextFormatter)
    FormatterRegistry.register(JsonFormatter)
    FormatterRegistry.register(CsvFormatter)


# Auto-register on module import
_register_defaults()


class ReportGenerator:
    """
    Generates screening reports from a ScreeningOutcome.

    Example:
        generator = ReportGenerator(config)
        report = generator.generate(outcome)
        paths = generator.write(report, formats=['text', 'json'])
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize report generator.

        Args:
            config: ConfigLoader instance (creates one if not provided)
        """
        self.config = config or ConfigLoader()
        self.logger = get_output_logger('report_generator')

    def generate(self, outcome, **kwargs) -> ReportData:
        """
        Build ReportData from a ScreeningOutcome.

        Args:
            outcome: ScreeningOutcome from MScoreScreener
            **kwargs: Extra context passed to section producers

        Returns:
            ReportData ready for formatting
        """
        sections = SectionRegistry.build_all(outcome, **kwargs)
        result = outcome.result

        report = ReportData(
            company=outcome.data.company_name,
            financial_year=outcome.data.financial_year,
            formula_variant=result.formula_variant.value,
            generated_at=datetime.now().isoformat(timespec='seconds'),
            sections=sections,
            summary={
                'm_score': result.m_score,
                'interpretation': result.interpretation.value,
                'fraud_likelihood': result.fraud_likelihood,
                'red_flags': list(result.flagged_components),
                'completeness': outcome.validation.completeness,
            },
        )

        self.logger.info(
            f"Generated report: {len(sections)} sections "
            f"for {report.company or '[unnamed]'}"
        )
        return report

    def render(self, report: ReportData, format_name: str) -> str:
        """
        Render report in one format.

        Args:
            report: ReportData to render
            format_name: Registered format name

        Returns:
            Rendered string

        Raises:
            ValueError: If no formatter is registered for format_name
        """
        formatter = FormatterRegistry.get(format_name, **self._formatter_options(format_name))
        if formatter is None:
            raise ValueError(f"No formatter for: {format_name}")
        return formatter.format_report(report)

    def write(
        self,
        report: ReportData,
        output_dir: Optional[Path] = None,
        formats: Optional[List[str]] = None,
    ) -> Dict[str, Path]:
        """
        Write report to files in requested formats.

        Args:
            report: ReportData to write
            output_dir: Override output directory (default from config)
            formats: List of format names (default: from config flags)

        Returns:
            Dict mapping format name to written file path

        Raises:
            ValueError: If no output directory is given or configured
        """
        if output_dir is None:
            output_dir = self._resolve_output_dir()

        if formats is None:
            formats = self._get_enabled_formats()

        written = {}
        for fmt_name in formats:
            formatter = FormatterRegistry.get(fmt_name, **self._formatter_options(fmt_name))
            if formatter is None:
                self.logger.warning(f"No formatter for: {fmt_name}")
                continue

            filepath = formatter.write_report(report, Path(output_dir))
            written[fmt_name] = filepath
            self.logger.info(f"Wrote {fmt_name}: {filepath}")

        return written

    def to_console(self, report: ReportData) -> str:
        """Render report as console-friendly text."""
        return self.render(report, OutputFormat.TEXT.value)

    def to_json(self, report: ReportData) -> str:
        """Render report as JSON string."""
        return self.render(report, OutputFormat.JSON.value)

    def _formatter_options(self, format_name: str) -> Dict[str, Any]:
        if format_name == OutputFormat.JSON.value:
            return {'indent': self.config.get('json_indent', 2)}
        return {}

    def _resolve_output_dir(self) -> Path:
        """Output directory from config."""
        reports_dir = self.config.get('reports_dir')
        if not reports_dir:
            raise ValueError("reports_dir not configured (FRAUD_SCREEN_REPORTS_DIR)")
        return Path(reports_dir)

    def _get_enabled_formats(self) -> List[str]:
        """Read enabled format flags from config."""
        format_flags = {
            OutputFormat.TEXT.value: self.config.get('output_text', True),
            OutputFormat.JSON.value: self.config.get('output_json', True),
            OutputFormat.CSV.value: self.config.get('output_csv', False),
        }
        return [name for name, enabled in format_flags.items() if enabled]


__all__ = ['ReportGenerator']
