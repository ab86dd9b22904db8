# Path: fraud_screen/tests/unit/test_score_models.py
"""
Unit Tests for Score Models and Model Parameters

Tests result serialisation and the fixed parameter table.
"""

import json
import sys
from pathlib import Path

import pytest

# Add fraud_screen to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import FlagDirection, FlagSeverity, FormulaVariant
from mscore import (
    BENEISH_MODEL,
    COMPONENT_NAMES,
    MScoreResult,
    RedFlag,
    ScoreComputationError,
    compute_score,
)


class TestModelParameters:
    """Test the Beneish parameter table."""

    def test_component_order(self):
        """Components are in fixed model order."""
        assert COMPONENT_NAMES == (
            'dsri', 'gmi', 'aqi', 'sgi', 'depi', 'sgai', 'tata', 'lvgi',
        )

    def test_coefficients(self):
        """Coefficients are the published values, signed."""
        coefficients = {s.name: s.coefficient for s in BENEISH_MODEL.components}

        assert BENEISH_MODEL.intercept == -4.84
        assert coefficients == {
            'dsri': 0.92, 'gmi': 0.528, 'aqi': 0.404, 'sgi': 0.892,
            'depi': 0.115, 'sgai': -0.172, 'tata': 4.679, 'lvgi': -0.327,
        }

    def test_thresholds(self):
        """Thresholds match the red-flag rules."""
        thresholds = {s.name: s.threshold for s in BENEISH_MODEL.components}

        assert thresholds == {
            'dsri': 1.031, 'gmi': 1.041, 'aqi': 1.039, 'sgi': 1.134,
            'depi': 1.077, 'sgai': 0.893, 'tata': 0.018, 'lvgi': 1.037,
        }

    def test_only_sgai_flags_below(self):
        """SGAI is the single below-threshold rule."""
        below = [s.name for s in BENEISH_MODEL.components
                 if s.direction == FlagDirection.BELOW]

        assert below == ['sgai']

    def test_severities(self):
        """DSRI and TATA are high, SGAI low, the rest moderate."""
        severities = {s.name: s.severity for s in BENEISH_MODEL.components}

        assert severities['dsri'] == FlagSeverity.HIGH
        assert severities['tata'] == FlagSeverity.HIGH
        assert severities['sgai'] == FlagSeverity.LOW
        assert severities['gmi'] == FlagSeverity.MODERATE

    def test_cutoffs(self):
        """Risk cut-offs are -1.78 and -2.22."""
        assert BENEISH_MODEL.high_risk_cutoff == -1.78
        assert BENEISH_MODEL.low_risk_cutoff == -2.22

    def test_unknown_component(self):
        """component() raises KeyError for an unknown key."""
        with pytest.raises(KeyError):
            BENEISH_MODEL.component('roa')

    def test_formula_for_variant(self):
        """Canonical formula text only differs where defined."""
        dsri = BENEISH_MODEL.component('dsri')
        gmi = BENEISH_MODEL.component('gmi')

        assert dsri.formula_for(FormulaVariant.CANONICAL) == dsri.formula
        assert gmi.formula_for(FormulaVariant.CANONICAL) != gmi.formula


class TestResultSerialisation:
    """Test MScoreResult.to_dict / from_dict."""

    def test_to_dict_shape(self, reference_data):
        """Stored shape has top-level score, nested components and flags."""
        d = compute_score(reference_data).to_dict()

        assert set(d) == {
            'm_score', 'interpretation', 'fraud_likelihood', 'formula_variant',
            'components', 'red_flags', 'contributions', 'details',
        }
        assert d['interpretation'] == 'MODERATE_RISK'
        assert list(d['components']) == list(COMPONENT_NAMES)
        assert d['red_flags'][0]['component'] == 'dsri'
        assert d['red_flags'][0]['severity'] == 'high'

    def test_to_dict_is_json_serialisable(self, reference_data):
        """to_dict output survives json.dumps."""
        json.dumps(compute_score(reference_data).to_dict())

    def test_from_dict_rebuilds_result(self, reference_data):
        """from_dict(to_dict()) gives an equal result."""
        result = compute_score(reference_data, FormulaVariant.CANONICAL)

        rebuilt = MScoreResult.from_dict(json.loads(json.dumps(result.to_dict())))

        assert rebuilt == result

    def test_red_flag_from_dict(self):
        """RedFlag.from_dict restores the severity enum."""
        flag = RedFlag.from_dict({
            'component': 'tata', 'value': 0.05, 'threshold': 0.018,
            'message': 'x', 'severity': 'high',
        })

        assert flag.severity == FlagSeverity.HIGH


class TestErrors:
    """Test error messages."""

    def test_score_computation_error_message(self):
        """Message names the term and both operands."""
        error = ScoreComputationError('aqi.prior', 1.5, 0.0)

        assert str(error) == 'Cannot compute aqi.prior: 1.5 / 0.0'
        assert error.term == 'aqi.prior'
