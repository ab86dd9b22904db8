# Path: fraud_screen/loaders/financial_data_loader.py
"""
Financial Data Loader

Turns extracted or manually entered payloads into FinancialData.

Accepted payload shapes:
- flat dictionary with snake_case keys ('total_assets_current')
- flat dictionary with camelCase keys ('totalAssets_current')
- extraction envelope:
    {"financialData": {...}, "confidence": {...}, "ocrMethod": "ai"}

Numbers may arrive as strings with thousand separators or currency
symbols. Anything that cannot be read as a number becomes None, never
a silent zero; required fields that end up None are reported by
build_financial_data().
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from config_loader import ConfigLoader
from constants import (
    ConfidenceLevel,
    EXTRACTION_CONFIDENCE,
    get_confidence_level as _confidence_level,
)
from core.logger.ipo_logging import get_input_logger
from mscore.errors import InvalidFinancialDataError
from mscore.financial_data import FinancialData

from .field_catalog import FieldCatalog


logger = get_input_logger('financial_data_loader')

_NON_NUMERIC = re.compile(r'[^\d.-]')

# Extraction method names used by upstream extractors
_METHOD_ALIASES = {
    'deepseek': 'ai',
    'gemini': 'ai',
}


# ==============================================================================
# VALUE CLEANING
# ==============================================================================

def clean_number(value: Any) -> Optional[float]:
    """
    Read a numeric value from a payload.

    Numbers pass through. Strings keep only digits, '.' and '-';
    an amount wrapped in parentheses is negative.

    Args:
        value: Raw payload value

    Returns:
        float, or None when blank or unreadable

    Example:
        clean_number('Rp 1,250,000')  # 1250000.0
        clean_number('(3,400)')       # -3400.0
        clean_number('n/a')           # None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    negative = text.startswith('(') and text.endswith(')')
    cleaned = _NON_NUMERIC.sub('', text)
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return -number if negative else number


def _normalise_method(method: Optional[str]) -> str:
    method = (method or 'manual').strip().lower()
    method = _METHOD_ALIASES.get(method, method)
    if method not in EXTRACTION_CONFIDENCE:
        raise ValueError(
            f"Unknown extraction method: '{method}' "
            f"(expected one of: {', '.join(EXTRACTION_CONFIDENCE)})"
        )
    return method


def _is_present(value: Any) -> bool:
    return value is not None and value != ''


# ==============================================================================
# PARSED PAYLOAD
# ==============================================================================

@dataclass
class ParsedPayload:
    """
    A payload mapped onto FinancialData field names.

    Attributes:
        values: Field name -> cleaned value (None when unreadable)
        confidence: Field name -> confidence score (0-100)
        method: Extraction method ('ai', 'basic' or 'manual')
        unknown_keys: Payload keys the catalogue does not recognise
        source: File the payload came from, if any
    """
    values: dict[str, Any] = field(default_factory=dict)
    confidence: dict[str, float] = field(default_factory=dict)
    method: str = 'manual'
    unknown_keys: list[str] = field(default_factory=list)
    source: Optional[str] = None

    @property
    def overall_confidence(self) -> float:
        """Mean confidence across all scored fields."""
        if not self.confidence:
            return 0.0
        return sum(self.confidence.values()) / len(self.confidence)


# ==============================================================================
# LOADER
# ==============================================================================

class FinancialDataLoader:
    """
    Parses payloads into FinancialData using the field catalogue.

    Example:
        loader = FinancialDataLoader()
        extracted = loader.load_file(Path('extracted.json'))
        manual = loader.parse({'sales_current': 125000}, method='manual')
        merged = loader.merge_payloads(extracted, manual)
        data = loader.build_financial_data(merged.values)
    """

    def __init__(
        self,
        catalog: Optional[FieldCatalog] = None,
        config: Optional[ConfigLoader] = None,
    ):
        """
        Initialize loader.

        Args:
            catalog: Field catalogue (loads the bundled one if not provided)
            config: Optional ConfigLoader (creates one if not provided)
        """
        self.catalog = catalog or FieldCatalog.load()
        self.config = config or ConfigLoader()

    # --------------------------------------------------------------------------
    # Parsing
    # --------------------------------------------------------------------------

    def parse(self, payload: dict[str, Any], method: Optional[str] = None) -> ParsedPayload:
        """
        Map a raw payload onto FinancialData field names.

        Args:
            payload: Flat dictionary or extraction envelope
            method: Extraction method; read from the envelope's
                    'ocrMethod' when not given, else 'manual'

        Returns:
            ParsedPayload

        Raises:
            ValueError: If the payload is not a dictionary or the
                        method is unknown
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Payload must be an object, got {type(payload).__name__}")

        raw_confidence: dict[str, Any] = {}
        if 'financialData' in payload:
            raw_values = payload['financialData'] or {}
            raw_confidence = payload.get('confidence') or {}
            method = method or payload.get('ocrMethod') or 'ai'
        else:
            raw_values = payload

        parsed = ParsedPayload(method=_normalise_method(method))

        for raw_key, raw_value in raw_values.items():
            name = self.catalog.resolve_key(raw_key)
            if name is None:
                parsed.unknown_keys.append(raw_key)
                continue
            parsed.values[name] = self._clean(name, raw_value)

        if parsed.unknown_keys:
            logger.debug(f"Ignored unknown payload keys: {', '.join(parsed.unknown_keys)}")

        parsed.confidence = self.field_confidence(parsed.values, parsed.method)
        for raw_key, score in raw_confidence.items():
            name = self.catalog.resolve_key(raw_key)
            number = clean_number(score)
            if name is not None and number is not None:
                parsed.confidence[name] = number

        logger.info(
            f"Parsed {len(parsed.values)} fields (method={parsed.method}, "
            f"completeness={self.completeness(parsed.values)}%)"
        )
        return parsed

    def _clean(self, name: str, value: Any) -> Any:
        if name == 'company_name':
            return str(value).strip() if value is not None else None
        number = clean_number(value)
        if name == 'financial_year' and number is not None:
            return int(number) if number.is_integer() else None
        return number

    def load_file(self, path: Path, method: Optional[str] = None) -> ParsedPayload:
        """
        Read and parse a JSON payload file.

        Args:
            path: JSON file
            method: Extraction method override

        Returns:
            ParsedPayload with source set

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or not an object
        """
        path = Path(path)
        logger.info(f"Loading payload: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e

        parsed = self.parse(payload, method)
        parsed.source = str(path)
        return parsed

    # --------------------------------------------------------------------------
    # Merging and confidence
    # --------------------------------------------------------------------------

    def merge_payloads(self, extracted: ParsedPayload, manual: ParsedPayload) -> ParsedPayload:
        """
        Merge user corrections over extracted values.

        A manual value wins whenever it is present, including zero.
        Confidence of a manually supplied field is the manual score.

        Args:
            extracted: Payload from document extraction
            manual: Payload entered or corrected by the user

        Returns:
            Merged ParsedPayload carrying the extracted method
        """
        merged = ParsedPayload(
            values=dict(extracted.values),
            confidence=dict(extracted.confidence),
            method=extracted.method,
            unknown_keys=extracted.unknown_keys + manual.unknown_keys,
            source=extracted.source,
        )
        overridden = []
        for name, value in manual.values.items():
            if _is_present(value):
                merged.values[name] = value
                merged.confidence[name] = EXTRACTION_CONFIDENCE['manual']
                overridden.append(name)

        logger.info(f"Merged payloads: {len(overridden)} fields from manual entry")
        return merged

    def field_confidence(self, values: dict[str, Any], method: str) -> dict[str, float]:
        """
        Confidence per catalogue field for one extraction method.

        A field scores the method's confidence when it holds a non-zero
        value and 0 otherwise.

        Args:
            values: Field name -> cleaned value
            method: Extraction method

        Returns:
            Field name -> confidence score
        """
        score = EXTRACTION_CONFIDENCE[_normalise_method(method)]
        return {
            name: score if values.get(name) else 0.0
            for name in self.catalog.field_names()
        }

    def get_confidence_level(self, score: float) -> ConfidenceLevel:
        """Confidence level using the configured thresholds."""
        return _confidence_level(
            score,
            high_min=self.config.get('high_confidence_threshold'),
            medium_min=self.config.get('medium_confidence_threshold'),
        )

    def completeness(self, values: dict[str, Any]) -> int:
        """
        Percentage of completeness fields present in a payload.

        Presence means not None and not blank; zero counts as present.
        """
        fields = self.catalog.completeness_fields()
        if not fields:
            return 0
        filled = sum(1 for name in fields if _is_present(values.get(name)))
        return round(filled / len(fields) * 100)

    # --------------------------------------------------------------------------
    # Building
    # --------------------------------------------------------------------------

    def missing_fields(self, values: dict[str, Any]) -> list[str]:
        """Required fields absent from values."""
        return [
            name for name in self.catalog.required_fields()
            if not _is_present(values.get(name))
        ]

    def missing_groups(self, values: dict[str, Any]) -> list[str]:
        """
        Either-or groups with no member present, per period.

        Returns:
            Entries like 'gross_profit_prior'
        """
        missing = []
        for group, members in self.catalog.either_or_groups().items():
            for period in members[0].periods:
                names = [f'{m.key}_{period.value}' for m in members]
                if not any(_is_present(values.get(n)) for n in names):
                    missing.append(f'{group}_{period.value}')
        return missing

    def build_financial_data(self, values: dict[str, Any]) -> FinancialData:
        """
        Build a FinancialData record from cleaned values.

        Optional fields left as None take their defaults.

        Args:
            values: Field name -> cleaned value

        Returns:
            FinancialData

        Raises:
            InvalidFinancialDataError: Naming every missing required field
        """
        missing = self.missing_fields(values)
        if missing:
            logger.error(f"Missing required fields: {', '.join(missing)}")
            raise InvalidFinancialDataError(
                {name: 'is required' for name in missing}
            )

        for group in self.missing_groups(values):
            logger.warning(f"No value for {group} or any of its alternatives")

        known = set(FinancialData.field_names())
        kwargs = {
            name: value for name, value in values.items()
            if name in known and value is not None
        }
        return FinancialData(**kwargs)


__all__ = [
    'clean_number',
    'ParsedPayload',
    'FinancialDataLoader',
]
