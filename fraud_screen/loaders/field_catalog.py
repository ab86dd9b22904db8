# Path: fraud_screen/loaders/field_catalog.py
"""
Field Catalog

Loads the financial line-item catalogue from dictionary/financial_fields.yaml
and validates each entry into a Pydantic FieldDefinition.

The catalogue answers three questions for the payload loader:
- which raw payload key maps to which FinancialData field
- which fields are required (honouring either-or groups)
- which fields count towards completeness
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from constants import Period
from core.logger.ipo_logging import get_input_logger
from dictionary import FIELDS_FILE


logger = get_input_logger('field_catalog')


class Section(str, Enum):
    """Statement a line item belongs to."""
    IDENTITY = "identity"
    INCOME_STATEMENT = "income_statement"
    BALANCE_SHEET = "balance_sheet"
    CASH_FLOW = "cash_flow"


class FieldDefinition(BaseModel):
    """One line item of the catalogue."""
    key: str = Field(
        description="snake_case stem, e.g. 'total_assets'"
    )
    alias: str = Field(
        description="camelCase stem used by extraction payloads, e.g. 'totalAssets'"
    )
    label: str = Field(
        description="Human-readable label"
    )
    section: Section = Field(
        description="Statement the item belongs to"
    )
    periods: list[Period] = Field(
        default_factory=lambda: [Period.CURRENT, Period.PRIOR],
        description="Periods the item exists for; empty for identity fields"
    )
    required: bool = Field(
        default=False,
        description="Must be present to build a FinancialData record"
    )
    either_or: Optional[str] = Field(
        default=None,
        description="Group whose members satisfy each other's requirement"
    )
    completeness: bool = Field(
        default=False,
        description="Counted in the completeness percentage"
    )
    statement_labels: list[str] = Field(
        default_factory=list,
        description="Captions the item usually appears under in filings"
    )

    @property
    def field_names(self) -> list[str]:
        """FinancialData field names for this item."""
        if not self.periods:
            return [self.key]
        return [f'{self.key}_{period.value}' for period in self.periods]

    def payload_keys(self) -> dict[str, str]:
        """Accepted payload key -> FinancialData field name."""
        if not self.periods:
            return {self.key: self.key, self.alias: self.key}
        keys = {}
        for period in self.periods:
            name = f'{self.key}_{period.value}'
            keys[name] = name
            keys[f'{self.alias}_{period.value}'] = name
        return keys


class FieldCatalog:
    """
    Validated set of FieldDefinitions.

    Example:
        catalog = FieldCatalog.load()
        catalog.resolve_key('grossProfit_prior')  # 'gross_profit_prior'
        catalog.required_fields()
    """

    def __init__(self, definitions: list[FieldDefinition]):
        """
        Initialize catalog.

        Args:
            definitions: Field definitions in catalogue order

        Raises:
            ValueError: If two definitions claim the same payload key
        """
        self.definitions = list(definitions)
        self._by_key = {d.key: d for d in self.definitions}
        self._key_map: dict[str, str] = {}
        for definition in self.definitions:
            for raw, name in definition.payload_keys().items():
                if self._key_map.get(raw, name) != name:
                    raise ValueError(f"Payload key '{raw}' defined twice")
                self._key_map[raw] = name

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'FieldCatalog':
        """
        Load the catalogue from YAML.

        Args:
            path: YAML file (defaults to dictionary/financial_fields.yaml)

        Returns:
            FieldCatalog

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is empty or an entry is invalid
        """
        path = Path(path) if path else FIELDS_FILE

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not data or not data.get('fields'):
            raise ValueError(f"No field definitions in {path}")

        definitions = []
        for index, entry in enumerate(data['fields']):
            try:
                definitions.append(FieldDefinition(**entry))
            except ValidationError as e:
                raise ValueError(
                    f"Invalid field definition #{index} in {path}: {e}"
                ) from e

        logger.debug(f"Loaded {len(definitions)} field definitions from {path.name}")
        return cls(definitions)

    def get(self, key: str) -> Optional[FieldDefinition]:
        """Definition by snake_case stem."""
        return self._by_key.get(key)

    def resolve_key(self, raw_key: str) -> Optional[str]:
        """FinancialData field name for a payload key, or None if unknown."""
        return self._key_map.get(raw_key)

    def field_names(self) -> list[str]:
        """Every FinancialData field name covered by the catalogue."""
        return [name for d in self.definitions for name in d.field_names]

    def required_fields(self) -> list[str]:
        """Fields that must always be present."""
        return [name for d in self.definitions if d.required for name in d.field_names]

    def either_or_groups(self) -> dict[str, list[FieldDefinition]]:
        """Either-or group name -> member definitions."""
        groups: dict[str, list[FieldDefinition]] = {}
        for definition in self.definitions:
            if definition.either_or:
                groups.setdefault(definition.either_or, []).append(definition)
        return groups

    def completeness_fields(self) -> list[str]:
        """Fields counted in the completeness percentage."""
        return [name for d in self.definitions if d.completeness for name in d.field_names]

    def label(self, field_name: str) -> str:
        """Display label for a FinancialData field name."""
        for definition in self.definitions:
            if field_name in definition.field_names:
                if not definition.periods:
                    return definition.label
                period = field_name.rsplit('_', 1)[1]
                return f"{definition.label} ({period})"
        return field_name


__all__ = ['Section', 'FieldDefinition', 'FieldCatalog']
