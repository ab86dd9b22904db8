# Path: fraud_screen/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for output formatters and a registry
to look them up by format name.

To add a new format (e.g., HTML):
1. Subclass BaseFormatter
2. Implement format_report()
3. Register via FormatterRegistry.register()
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Type

from ..report_models import ReportData

_UNSAFE_FILENAME = re.compile(r'[^A-Za-z0-9._-]+')


class BaseFormatter(ABC):
    """
    Abstract base for report formatters.

    Formatters iterate over sections and items generically,
    so new section types are handled automatically.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.json', '.txt')."""

    @abstractmethod
    def format_report(self, report: ReportData) -> str:
        """
        Render report to string.

        Args:
            report: ReportData to render

        Returns:
            Formatted string representation
        """

    def write_report(self, report: ReportData, output_path: Path) -> Path:
        """
        Write report to file.

        Args:
            report: ReportData to render
            output_path: Directory to write into

        Returns:
            Path to the written file
        """
        output_path.mkdir(parents=True, exist_ok=True)
        filepath = output_path / self.build_filename(report)
        filepath.write_text(self.format_report(report), encoding='utf-8')
        return filepath

    def build_filename(self, report: ReportData) -> str:
        """Build output filename from report metadata."""
        company = _UNSAFE_FILENAME.sub('_', report.company.strip()) or 'unnamed'
        year = report.financial_year or 'unknown'
        return f"mscore_{company}_{year}{self.file_extension}"


class FormatterRegistry:
    """
    Registry of available formatters, looked up by format name.
    """

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        cls._formatters[formatter_class().format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str, **options: Any) -> Optional[BaseFormatter]:
        """
        Get a formatter instance by name.

        Args:
            format_name: Registered format name
            **options: Constructor options for the formatter

        Returns:
            Formatter instance or None if not registered
        """
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class(**options)
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._formatters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._formatters.clear()


__all__ = ['BaseFormatter', 'FormatterRegistry']
