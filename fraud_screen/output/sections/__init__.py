# Path: fraud_screen/output/sections/__init__.py
"""
Report Sections

Each section producer converts part of a ScreeningOutcome into
ReportSection instances.
"""

from .base_section import BaseSection
from .section_registry import SectionRegistry
from .overview import OverviewSection
from .input_data import InputDataSection
from .components import ComponentsSection
from .contributions import ContributionsSection
from .red_flags import RedFlagsSection

__all__ = [
    'BaseSection',
    'SectionRegistry',
    'OverviewSection',
    'InputDataSection',
    'ComponentsSection',
    'ContributionsSection',
    'RedFlagsSection',
]
