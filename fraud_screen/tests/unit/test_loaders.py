# Path: fraud_screen/tests/unit/test_loaders.py
"""
Unit Tests for Loaders

Tests payload intake including:
- Field catalogue loading and key resolution
- Number cleaning
- Payload parsing (flat and extraction envelope)
- Manual override merging and confidence
- Building FinancialData
"""

import json
import sys
from pathlib import Path

import pytest

# Add fraud_screen to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import ConfidenceLevel
from loaders import FieldCatalog, FinancialDataLoader, clean_number
from mscore import FinancialData, InvalidFinancialDataError


@pytest.fixture
def loader(mock_config):
    """Loader with the bundled catalogue and mock config."""
    return FinancialDataLoader(config=mock_config)


# ==============================================================================
# FIELD CATALOG
# ==============================================================================

class TestFieldCatalog:
    """Test the bundled field catalogue."""

    def test_loads_bundled_catalogue(self):
        """Default load reads dictionary/financial_fields.yaml."""
        catalog = FieldCatalog.load()

        assert catalog.get('sales') is not None
        assert catalog.get('goodwill') is None

    def test_covers_every_record_field(self):
        """Catalogue field names equal FinancialData field names."""
        catalog = FieldCatalog.load()

        assert set(catalog.field_names()) == set(FinancialData.field_names())

    def test_required_fields_match_record(self):
        """Required catalogue fields are the record's required fields."""
        catalog = FieldCatalog.load()

        assert set(catalog.required_fields()) == set(FinancialData.required_field_names())

    def test_resolve_snake_and_camel(self):
        """Both key styles resolve to the record field."""
        catalog = FieldCatalog.load()

        assert catalog.resolve_key('total_assets_current') == 'total_assets_current'
        assert catalog.resolve_key('totalAssets_current') == 'total_assets_current'
        assert catalog.resolve_key('companyName') == 'company_name'
        assert catalog.resolve_key('unknownKey_current') is None

    def test_current_only_items(self):
        """Operating income has no prior-period key."""
        catalog = FieldCatalog.load()

        assert catalog.resolve_key('operatingIncome_current') == 'operating_income_current'
        assert catalog.resolve_key('operatingIncome_prior') is None

    def test_either_or_groups(self):
        """Gross profit and SG&A groups are defined."""
        groups = FieldCatalog.load().either_or_groups()

        assert set(groups) == {'gross_profit', 'sga'}
        assert [d.key for d in groups['gross_profit']] == ['gross_profit', 'cogs']
        assert len(groups['sga']) == 4

    def test_completeness_fields(self):
        """Twenty-two items count towards completeness."""
        assert len(FieldCatalog.load().completeness_fields()) == 22

    def test_labels(self):
        """Labels include the period for period fields."""
        catalog = FieldCatalog.load()

        assert catalog.label('gross_profit_prior') == 'Gross Profit (prior)'
        assert catalog.label('company_name') == 'Company Name'
        assert catalog.label('mystery') == 'mystery'


class TestFieldCatalogFiles:
    """Test loading catalogue files."""

    def test_empty_file(self, temp_dir):
        """An empty catalogue is an error."""
        path = temp_dir / 'fields.yaml'
        path.write_text('version: 1\nfields: []\n')

        with pytest.raises(ValueError, match='No field definitions'):
            FieldCatalog.load(path)

    def test_invalid_entry(self, temp_dir):
        """An entry failing validation names its index."""
        path = temp_dir / 'fields.yaml'
        path.write_text(
            'fields:\n'
            '  - key: sales\n'
            '    alias: sales\n'
            '    label: Sales\n'
            '    section: notes\n'
        )

        with pytest.raises(ValueError, match='#0'):
            FieldCatalog.load(path)

    def test_conflicting_payload_keys(self, temp_dir):
        """Two items claiming the same payload key are rejected."""
        path = temp_dir / 'fields.yaml'
        path.write_text(
            'fields:\n'
            '  - {key: sales, alias: revenue, label: Sales, section: income_statement}\n'
            '  - {key: revenue, alias: rev, label: Revenue, section: income_statement}\n'
        )

        with pytest.raises(ValueError, match='defined twice'):
            FieldCatalog.load(path)

    def test_missing_file(self, temp_dir):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FieldCatalog.load(temp_dir / 'absent.yaml')


# ==============================================================================
# NUMBER CLEANING
# ==============================================================================

class TestCleanNumber:
    """Test clean_number()."""

    @pytest.mark.parametrize('raw,expected', [
        (1250, 1250.0),
        (12.5, 12.5),
        ('1,250,000', 1250000.0),
        ('Rp 1,250,000', 1250000.0),
        ('$ 3400.50', 3400.5),
        ('(3,400)', -3400.0),
        ('-200', -200.0),
        ('0', 0.0),
    ])
    def test_readable_values(self, raw, expected):
        """Readable values are converted to float."""
        assert clean_number(raw) == expected

    @pytest.mark.parametrize('raw', [None, '', 'n/a', '-', True, '1.2.3'])
    def test_unreadable_values(self, raw):
        """Unreadable values become None, never zero."""
        assert clean_number(raw) is None


# ==============================================================================
# PARSING
# ==============================================================================

class TestParse:
    """Test FinancialDataLoader.parse()."""

    def test_flat_payload(self, loader, flat_payload):
        """Flat payloads are manual entries."""
        parsed = loader.parse(flat_payload)

        assert parsed.method == 'manual'
        assert parsed.values['sales_current'] == 100000.0
        assert parsed.unknown_keys == []
        assert parsed.confidence['sales_current'] == 100.0

    def test_envelope(self, loader, extraction_envelope):
        """Envelope values are cleaned and the method normalised."""
        parsed = loader.parse(extraction_envelope)

        assert parsed.method == 'ai'
        assert parsed.values['total_assets_prior'] == 180000.0
        assert parsed.values['company_name'] == 'Test Company'
        assert parsed.values['financial_year'] == 2024
        assert parsed.confidence['sales_current'] == 95.0

    def test_envelope_builds_reference_record(self, loader, extraction_envelope, reference_data):
        """An extracted envelope yields the same record as direct entry."""
        parsed = loader.parse(extraction_envelope)

        assert loader.build_financial_data(parsed.values) == reference_data

    def test_envelope_confidence_overrides(self, loader):
        """Per-field confidence from the envelope is kept."""
        from sample_data import create_extraction_envelope

        envelope = create_extraction_envelope(confidence={'totalAssets_current': '62'})
        parsed = loader.parse(envelope)

        assert parsed.confidence['total_assets_current'] == 62.0

    def test_absent_field_scores_zero(self, loader, flat_payload):
        """Fields without a value score zero confidence."""
        parsed = loader.parse(flat_payload)

        assert parsed.confidence['oil_and_gas_current'] == 0.0
        assert 0 < parsed.overall_confidence < 100

    def test_unknown_keys_collected(self, loader):
        """Unrecognised keys are reported, not loaded."""
        parsed = loader.parse({'sales_current': '10', 'goodwill_current': '5'})

        assert parsed.unknown_keys == ['goodwill_current']
        assert 'goodwill_current' not in parsed.values

    def test_unreadable_number_is_none(self, loader):
        """Unreadable numbers are kept as None."""
        parsed = loader.parse({'sales_current': 'n/a'})

        assert parsed.values['sales_current'] is None

    def test_fractional_year_rejected(self, loader):
        """A non-integer year becomes None."""
        assert loader.parse({'financial_year': '2024.5'}).values['financial_year'] is None

    def test_explicit_method(self, loader, flat_payload):
        """An explicit method overrides the default."""
        parsed = loader.parse(flat_payload, method='basic')

        assert parsed.method == 'basic'
        assert parsed.confidence['sales_current'] == 60.0

    def test_unknown_method(self, loader, flat_payload):
        """Unknown extraction methods are rejected."""
        with pytest.raises(ValueError, match='Unknown extraction method'):
            loader.parse(flat_payload, method='scanner')

    def test_non_dict_payload(self, loader):
        """Payload must be a JSON object."""
        with pytest.raises(ValueError, match='must be an object'):
            loader.parse([1, 2, 3])


class TestLoadFile:
    """Test reading payload files."""

    def test_load_file(self, loader, payload_file):
        """Files are parsed and their source recorded."""
        parsed = loader.load_file(payload_file)

        assert parsed.source == str(payload_file)
        assert parsed.values['sales_prior'] == 90000.0

    def test_invalid_json(self, loader, temp_dir):
        """Invalid JSON raises ValueError."""
        path = temp_dir / 'broken.json'
        path.write_text('{"sales_current": ')

        with pytest.raises(ValueError, match='Invalid JSON'):
            loader.load_file(path)

    def test_missing_file(self, loader, temp_dir):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            loader.load_file(temp_dir / 'absent.json')


# ==============================================================================
# MERGING AND CONFIDENCE
# ==============================================================================

class TestMergeAndConfidence:
    """Test manual overrides and confidence levels."""

    def test_manual_value_wins(self, loader, extraction_envelope):
        """Manual values replace extracted ones at full confidence."""
        extracted = loader.parse(extraction_envelope)
        manual = loader.parse({'sales_current': '125,000'}, method='manual')

        merged = loader.merge_payloads(extracted, manual)

        assert merged.values['sales_current'] == 125000.0
        assert merged.confidence['sales_current'] == 100.0
        assert merged.values['sales_prior'] == 90000.0
        assert merged.method == 'ai'

    def test_manual_zero_wins(self, loader, extraction_envelope):
        """An explicit zero is a correction, not a blank."""
        extracted = loader.parse(extraction_envelope)
        manual = loader.parse({'cash_current': 0}, method='manual')

        merged = loader.merge_payloads(extracted, manual)

        assert merged.values['cash_current'] == 0.0

    def test_manual_blank_ignored(self, loader, extraction_envelope):
        """Blank manual entries keep the extracted value."""
        extracted = loader.parse(extraction_envelope)
        manual = loader.parse({'cash_current': 'n/a'}, method='manual')

        merged = loader.merge_payloads(extracted, manual)

        assert merged.values['cash_current'] == 10000.0

    def test_merge_does_not_mutate_inputs(self, loader, extraction_envelope):
        """Merging returns a new payload."""
        extracted = loader.parse(extraction_envelope)
        manual = loader.parse({'sales_current': 1}, method='manual')

        loader.merge_payloads(extracted, manual)

        assert extracted.values['sales_current'] == 100000.0

    @pytest.mark.parametrize('score,level', [
        (95.0, ConfidenceLevel.HIGH),
        (75.0, ConfidenceLevel.HIGH),
        (60.0, ConfidenceLevel.MEDIUM),
        (10.0, ConfidenceLevel.LOW),
        (0.0, ConfidenceLevel.NONE),
    ])
    def test_confidence_levels(self, loader, score, level):
        """Levels use the configured thresholds."""
        assert loader.get_confidence_level(score) == level


# ==============================================================================
# BUILDING
# ==============================================================================

class TestBuildFinancialData:
    """Test building records from parsed values."""

    def test_completeness(self, loader, flat_payload):
        """Full payload is 100% complete; zero counts as present."""
        values = loader.parse(flat_payload).values

        assert loader.completeness(values) == 100

        values['company_name'] = None
        assert loader.completeness(values) == 95

    def test_missing_required(self, loader, flat_payload):
        """Missing required fields are named in the error."""
        del flat_payload['sales_prior']
        values = loader.parse(flat_payload).values

        assert loader.missing_fields(values) == ['sales_prior']
        with pytest.raises(InvalidFinancialDataError) as exc_info:
            loader.build_financial_data(values)

        assert exc_info.value.field_errors == {'sales_prior': 'is required'}

    def test_unreadable_required_is_missing(self, loader, flat_payload):
        """A required field that could not be read is missing."""
        flat_payload['ppe_current'] = 'unknown'
        values = loader.parse(flat_payload).values

        assert loader.missing_fields(values) == ['ppe_current']

    def test_missing_groups(self, loader, flat_payload):
        """Either-or groups with no member are reported per period."""
        del flat_payload['gross_profit_prior']
        del flat_payload['cogs_prior']
        values = loader.parse(flat_payload).values

        assert loader.missing_groups(values) == ['gross_profit_prior']

    def test_optional_none_uses_default(self, loader, flat_payload):
        """Optional fields left as None take their defaults."""
        flat_payload['cash_prior'] = 'n/a'
        data = loader.build_financial_data(loader.parse(flat_payload).values)

        assert data.cash_prior == 0.0

    def test_round_trip_via_file(self, loader, temp_dir, flat_payload, reference_data):
        """A payload written to disk builds the reference record."""
        path = temp_dir / 'data.json'
        path.write_text(json.dumps(flat_payload))

        data = loader.build_financial_data(loader.load_file(path).values)

        assert data == reference_data
