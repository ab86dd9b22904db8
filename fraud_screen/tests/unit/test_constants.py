# Path: fraud_screen/tests/unit/test_constants.py
"""
Unit Tests for constants.py

Tests system-wide enums and display constants.
"""

import sys
from pathlib import Path

import pytest

# Add fraud_screen to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import (
    ConfidenceLevel,
    EXTRACTION_CONFIDENCE,
    FormulaVariant,
    DivisionPolicy,
    RiskInterpretation,
    RISK_DISPLAY_NAMES,
    STATUS_OK,
    STATUS_FAIL,
    STATUS_WARN,
    STATUS_INFO,
    get_confidence_level,
)


class TestRiskInterpretation:
    """Test risk tiers."""

    def test_three_tiers(self):
        """There are exactly three tiers, highest first."""
        assert [r.value for r in RiskInterpretation] == [
            'HIGH_RISK', 'MODERATE_RISK', 'LOW_RISK',
        ]

    def test_display_names_cover_tiers(self):
        """Every tier has a display name."""
        assert set(RISK_DISPLAY_NAMES) == {r.value for r in RiskInterpretation}


class TestEngineEnums:
    """Test variant and policy enums."""

    def test_defaults_exist(self):
        """Enum values used as defaults are valid."""
        assert FormulaVariant('simplified') is FormulaVariant.SIMPLIFIED
        assert DivisionPolicy('raise') is DivisionPolicy.RAISE

    def test_str_enum(self):
        """Enums compare equal to their string values."""
        assert FormulaVariant.CANONICAL == 'canonical'


class TestConfidence:
    """Test confidence helpers."""

    @pytest.mark.parametrize('score,level', [
        (100.0, ConfidenceLevel.HIGH),
        (75.0, ConfidenceLevel.HIGH),
        (74.9, ConfidenceLevel.MEDIUM),
        (50.0, ConfidenceLevel.MEDIUM),
        (1.0, ConfidenceLevel.LOW),
        (0.0, ConfidenceLevel.NONE),
    ])
    def test_default_thresholds(self, score, level):
        """Default thresholds are 75 and 50."""
        assert get_confidence_level(score) == level

    def test_custom_thresholds(self):
        """Thresholds can be overridden."""
        assert get_confidence_level(60.0, high_min=60.0) == ConfidenceLevel.HIGH

    def test_method_scores(self):
        """Manual entry is fully trusted."""
        assert EXTRACTION_CONFIDENCE['manual'] == 100.0
        assert EXTRACTION_CONFIDENCE['ai'] > EXTRACTION_CONFIDENCE['basic']


class TestStatusIndicators:
    """Test status indicator constants."""

    def test_status_indicators_are_ascii(self):
        """Status indicators should be ASCII only."""
        for indicator in [STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO]:
            assert indicator.isascii()
