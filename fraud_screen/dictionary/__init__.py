# Path: fraud_screen/dictionary/__init__.py
"""
Dictionary Module - Financial Field Definitions

YAML catalogue of every statement line item the screening system
accepts. The catalogue drives payload parsing (which keys are
recognised, snake_case or camelCase), required-field checks and
completeness reporting.

Adding a line item:
    1. Add an entry to financial_fields.yaml
    2. Add the matching field(s) to mscore.financial_data.FinancialData

Example:
    from loaders import FieldCatalog

    catalog = FieldCatalog.load()
    catalog.resolve_key('totalAssets_current')  # 'total_assets_current'
"""

from pathlib import Path

# Dictionary root path
DICTIONARY_ROOT = Path(__file__).parent

FIELDS_FILE = DICTIONARY_ROOT / 'financial_fields.yaml'

__all__ = [
    'DICTIONARY_ROOT',
    'FIELDS_FILE',
]
