# Path: fraud_screen/mscore/__init__.py
"""
M-Score Package

Beneish M-Score engine and the pieces around it.

Components:
- financial_data: Two-period input record
- model_parameters: Coefficients, thresholds, cut-offs
- ratio_engine / score_engine: Pure computation
- validation: Pre-scoring checks
- screening: Validate, compute and log in one call
"""

from .errors import MScoreError, InvalidFinancialDataError, ScoreComputationError
from .financial_data import FinancialData, PeriodFigures
from .model_parameters import BENEISH_MODEL, COMPONENT_NAMES, ComponentSpec, ModelParameters
from .score_models import (
    MScoreComponents,
    RedFlag,
    ScoreContribution,
    RatioDetail,
    MScoreResult,
)
from .score_engine import (
    compute_score,
    compute_components,
    classify_score,
    detect_red_flags,
    weigh_components,
)
from .validation import ValidationReport, validate_financial_data, require_scoreable
from .screening import MScoreScreener, ScreeningOutcome


__all__ = [
    # Errors
    'MScoreError',
    'InvalidFinancialDataError',
    'ScoreComputationError',

    # Data
    'FinancialData',
    'PeriodFigures',
    'MScoreComponents',
    'RedFlag',
    'ScoreContribution',
    'RatioDetail',
    'MScoreResult',

    # Model
    'BENEISH_MODEL',
    'COMPONENT_NAMES',
    'ComponentSpec',
    'ModelParameters',

    # Engine
    'compute_score',
    'compute_components',
    'classify_score',
    'detect_red_flags',
    'weigh_components',

    # Validation and screening
    'ValidationReport',
    'validate_financial_data',
    'require_scoreable',
    'MScoreScreener',
    'ScreeningOutcome',
]
