# Path: fraud_screen/tests/unit/test_report_generator.py
"""
Unit Tests for Report Generation

Tests the output layer including:
- Section producers
- Text, JSON and CSV formatters
- Writing report files
"""

import csv
import io
import json
import sys
from pathlib import Path

import pytest

# Add fraud_screen to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mscore import MScoreScreener
from output import FormatterRegistry, ReportGenerator, SectionRegistry
from output.sections.components import NORMAL_MESSAGE
from output.sections.overview import build_conclusion
from sample_data import create_financial_data


@pytest.fixture
def outcome(mock_config, reference_data):
    """Screening outcome for the reference record."""
    return MScoreScreener(mock_config).screen(reference_data)


@pytest.fixture
def generator(mock_config):
    """Report generator with mock config."""
    return ReportGenerator(mock_config)


@pytest.fixture
def report(generator, outcome):
    """Report built from the reference outcome."""
    return generator.generate(outcome)


class TestRegistries:
    """Test default registrations."""

    def test_section_order(self):
        """Sections are registered in report order."""
        assert SectionRegistry.get_registered() == [
            'overview', 'input_data', 'components', 'contributions', 'red_flags',
        ]

    def test_formatters(self):
        """Text, JSON and CSV formatters are available."""
        assert set(FormatterRegistry.get_available()) >= {'text', 'json', 'csv'}
        assert FormatterRegistry.get('pdf') is None


class TestGenerate:
    """Test ReportData assembly."""

    def test_report_metadata(self, report):
        """Report carries company, year and variant."""
        assert report.company == 'Test Company'
        assert report.financial_year == 2024
        assert report.formula_variant == 'simplified'
        assert report.generated_at

    def test_summary(self, report, outcome):
        """Summary mirrors the result."""
        assert report.summary['m_score'] == outcome.result.m_score
        assert report.summary['interpretation'] == 'MODERATE_RISK'
        assert report.summary['red_flags'] == ['dsri']
        assert report.summary['completeness'] == 100

    def test_section_ids(self, report):
        """Every section is produced in order."""
        assert [s.section_id for s in report.sections] == [
            'overview', 'input_data', 'components', 'contributions', 'red_flags',
        ]
        assert report.get_section('appendix') is None


class TestSections:
    """Test individual section producers."""

    def test_overview_items(self, report):
        """Overview shows score, tier and conclusion."""
        items = {i.key: i for i in report.get_section('overview').items}

        assert items['m_score'].details['display'] == '-2.212'
        assert items['interpretation'].details['display'] == 'Moderate Risk'
        assert items['interpretation'].status == 'warning'
        assert items['fraud_likelihood'].details['display'] == '30.4%'
        assert items['red_flag_count'].value == 1
        assert 'does not classify Test Company' in items['conclusion'].value

    def test_input_rows(self, report):
        """Input table lists both periods and effective figures."""
        section = report.get_section('input_data')
        items = {i.key: i for i in section.items}

        assert len(section.items) == 17
        assert items['sales'].details == {
            'current': 100000.0, 'prior': 90000.0,
            'effective_current': 100000.0, 'effective_prior': 90000.0,
        }
        assert items['sga_expense'].details['effective_prior'] == 18000.0
        assert items['operating_income_current'].details['prior'] is None

    def test_component_rows(self, report):
        """Component rows carry formula, sub-ratios and flag state."""
        items = {i.key: i for i in report.get_section('components').items}

        assert list(items) == ['dsri', 'gmi', 'aqi', 'sgi', 'depi', 'sgai', 'tata', 'lvgi']
        assert items['dsri'].status == 'warning'
        assert items['dsri'].details['flagged'] is True
        assert items['dsri'].details['message'].startswith('High DSRI')
        assert items['gmi'].status == 'ok'
        assert items['gmi'].details['message'] == NORMAL_MESSAGE
        assert items['sgi'].details['numerator_value'] == 100000.0

    def test_contribution_rows(self, report, outcome):
        """Contributions start with the constant and total the score."""
        section = report.get_section('contributions')

        assert section.items[0].label == 'Constant'
        assert section.items[0].value == -4.84
        assert section.items[1].label == 'DSRI'
        assert section.metadata['total'] == outcome.result.m_score

    def test_red_flag_rows(self, report):
        """High-severity flags render as errors."""
        items = report.get_section('red_flags').items

        assert [i.key for i in items] == ['dsri']
        assert items[0].status == 'error'
        assert items[0].details['threshold'] == 1.031


class TestConclusion:
    """Test the conclusion sentence."""

    def test_above_cutoff(self):
        """Scores above -1.78 are called likely manipulators."""
        text = build_conclusion('Acme', -1.2)

        assert 'above -1.78' in text
        assert 'classifies Acme as a likely manipulator' in text

    def test_at_cutoff(self):
        """-1.78 itself is not a likely manipulator."""
        assert 'does not classify' in build_conclusion('Acme', -1.78)

    def test_unnamed_company(self):
        """An empty name reads as 'The company'."""
        assert 'The company' in build_conclusion('', -3.0)


class TestFormatters:
    """Test rendering."""

    def test_text(self, generator, report):
        """Text report shows header, tier and flags."""
        text = generator.to_console(report)

        assert 'BENEISH M-SCORE SCREENING: Test Company' in text
        assert 'Moderate Risk' in text
        assert 'DSRI' in text
        assert 'M-Score total' in text

    def test_text_is_ascii(self, generator, report):
        """Text output is ASCII only."""
        for char in generator.to_console(report):
            assert ord(char) < 128, f"Non-ASCII character found: {char}"

    def test_text_without_flags(self, mock_config, generator):
        """A clean record says so."""
        data = create_financial_data(receivables_prior=18000.0)
        report = generator.generate(MScoreScreener(mock_config).screen(data))

        assert '[OK] No red flags' in generator.to_console(report)

    def test_json(self, generator, report):
        """JSON report parses and carries the summary."""
        data = json.loads(generator.to_json(report))

        assert data['company'] == 'Test Company'
        assert data['summary']['interpretation'] == 'MODERATE_RISK'
        assert len(data['sections']) == 5

    def test_csv(self, generator, report):
        """CSV has a header, metadata rows and one row per item."""
        rows = list(csv.reader(io.StringIO(generator.render(report, 'csv'))))

        assert rows[0][:4] == ['section', 'key', 'label', 'value']
        assert rows[1][:4] == ['metadata', 'company', '', 'Test Company']
        dsri = next(r for r in rows if r[0] == 'components' and r[1] == 'dsri')
        assert dsri[3] == '1.2000'
        assert dsri[4] == 'warning'

    def test_unknown_format(self, generator, report):
        """Rendering an unknown format raises ValueError."""
        with pytest.raises(ValueError, match='No formatter'):
            generator.render(report, 'pdf')


class TestWrite:
    """Test writing report files."""

    def test_write_requested_formats(self, generator, report, temp_dir):
        """Each format is written with a sanitised file name."""
        written = generator.write(report, temp_dir, ['text', 'json', 'csv'])

        assert set(written) == {'text', 'json', 'csv'}
        assert written['json'].name == 'mscore_Test_Company_2024.json'
        assert written['text'].name == 'mscore_Test_Company_2024.txt'
        for path in written.values():
            assert path.exists()

    def test_write_default_formats(self, generator, report, temp_dir):
        """Default formats come from the output flags."""
        written = generator.write(report, temp_dir)

        assert set(written) == {'text', 'json'}

    def test_write_skips_unknown_format(self, generator, report, temp_dir):
        """Unknown formats are skipped."""
        written = generator.write(report, temp_dir, ['pdf', 'json'])

        assert list(written) == ['json']

    def test_write_without_directory(self, generator, report):
        """Writing needs a configured or explicit directory."""
        with pytest.raises(ValueError, match='reports_dir not configured'):
            generator.write(report)

    def test_unnamed_file_name(self, mock_config, generator, temp_dir):
        """Unnamed records get a placeholder file name."""
        data = create_financial_data(company_name='', financial_year=None)
        report = generator.generate(MScoreScreener(mock_config).screen(data))

        written = generator.write(report, temp_dir, ['json'])

        assert written['json'].name == 'mscore_unnamed_unknown.json'
