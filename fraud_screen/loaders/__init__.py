# Path: fraud_screen/loaders/__init__.py
"""
Loaders Package

INPUT layer: reads extracted or manually entered payloads and builds
FinancialData records. Document text extraction itself happens
upstream; this package starts from its JSON output.
"""

from .field_catalog import FieldCatalog, FieldDefinition, Section
from .financial_data_loader import FinancialDataLoader, ParsedPayload, clean_number

__all__ = [
    'FieldCatalog',
    'FieldDefinition',
    'Section',
    'FinancialDataLoader',
    'ParsedPayload',
    'clean_number',
]
