# Path: fraud_screen/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders ReportData into a specific output format.
Formatters know nothing about the M-Score itself.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter
from .csv_formatter import CsvFormatter

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
    'CsvFormatter',
]
