# Path: fraud_screen/output/__init__.py
"""
Output Module for fraud_screen

Turns screening outcomes into human-readable and machine-readable
reports.

Report generation flow:
    ScreeningOutcome -> [Section Producers] -> ReportData -> [Formatters] -> Files

Extensibility:
    - New report sections: subclass BaseSection, register with SectionRegistry
    - New output formats: subclass BaseFormatter, register with FormatterRegistry
"""

from .report_models import ReportData, ReportSection, SectionItem
from .report_generator import ReportGenerator
from .sections import (
    BaseSection,
    SectionRegistry,
    OverviewSection,
    InputDataSection,
    ComponentsSection,
    ContributionsSection,
    RedFlagsSection,
)
from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
    CsvFormatter,
)


__all__ = [
    # Report models
    'ReportData',
    'ReportSection',
    'SectionItem',
    # Generator
    'ReportGenerator',
    # Sections
    'BaseSection',
    'SectionRegistry',
    'OverviewSection',
    'InputDataSection',
    'ComponentsSection',
    'ContributionsSection',
    'RedFlagsSection',
    # Formatters
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
    'CsvFormatter',
]
