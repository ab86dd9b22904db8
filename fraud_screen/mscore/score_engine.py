# Path: fraud_screen/mscore/score_engine.py
"""
M-Score Engine

Pure, deterministic computation of the Beneish M-Score:

    M = -4.84 + 0.920*DSRI + 0.528*GMI + 0.404*AQI + 0.892*SGI
        + 0.115*DEPI - 0.172*SGAI + 4.679*TATA - 0.327*LVGI

followed by risk classification and rule-based red flags.

The engine does not validate its input; callers reject unscoreable
records first (see validation.require_scoreable, or use the screener).
Safe to call concurrently: nothing here holds state.
"""

import math

from constants import DivisionPolicy, FormulaVariant, RiskInterpretation

from .errors import ScoreComputationError
from .financial_data import FinancialData
from .model_parameters import BENEISH_MODEL, ModelParameters
from .ratio_engine import compute_components
from .score_models import (
    MScoreComponents,
    MScoreResult,
    RedFlag,
    ScoreContribution,
)


def weigh_components(
    components: MScoreComponents,
    params: ModelParameters = BENEISH_MODEL,
) -> tuple[float, tuple[ScoreContribution, ...]]:
    """
    Sum the weighted components onto the intercept.

    Terms are added left to right in model order.

    Args:
        components: The eight indices
        params: Model parameters

    Returns:
        (raw composite score, contributions starting with the intercept)
    """
    score = params.intercept
    contributions = [
        ScoreContribution(
            component='intercept',
            coefficient=1.0,
            value=params.intercept,
            weighted=params.intercept,
        )
    ]
    for spec in params.components:
        value = getattr(components, spec.name)
        weighted = spec.coefficient * value
        score += weighted
        contributions.append(ScoreContribution(
            component=spec.name,
            coefficient=spec.coefficient,
            value=value,
            weighted=weighted,
        ))
    return score, tuple(contributions)


def classify_score(
    m_score: float,
    params: ModelParameters = BENEISH_MODEL,
) -> tuple[RiskInterpretation, float]:
    """
    Map an M-Score to a risk tier and a fraud-likelihood heuristic.

    Tiers:
        m > -1.78          HIGH_RISK      min(95, 50 + (m + 1.78) * 20)
        -2.22 < m <= -1.78 MODERATE_RISK  30 + ((m + 2.22) / 0.44) * 20
        m <= -2.22         LOW_RISK       max(5, 30 + (m + 2.22) * 10)

    The likelihood is finally clamped to [5, 95].

    Args:
        m_score: Composite score
        params: Model parameters

    Returns:
        (RiskInterpretation, fraud likelihood)

    Raises:
        ValueError: If m_score is not finite
    """
    if not math.isfinite(m_score):
        raise ValueError(f"Cannot classify non-finite M-Score: {m_score!r}")

    if m_score > params.high_risk_cutoff:
        interpretation = RiskInterpretation.HIGH_RISK
        likelihood = min(
            params.likelihood_max,
            params.high_base + (m_score - params.high_risk_cutoff) * params.high_slope,
        )
    elif m_score > params.low_risk_cutoff:
        interpretation = RiskInterpretation.MODERATE_RISK
        likelihood = params.moderate_base + (
            (m_score - params.low_risk_cutoff) / params.moderate_band_width
            * params.moderate_slope
        )
    else:
        interpretation = RiskInterpretation.LOW_RISK
        likelihood = max(
            params.likelihood_min,
            params.low_base + (m_score - params.low_risk_cutoff) * params.low_slope,
        )

    likelihood = max(params.likelihood_min, min(params.likelihood_max, likelihood))
    return interpretation, likelihood


def detect_red_flags(
    components: MScoreComponents,
    params: ModelParameters = BENEISH_MODEL,
) -> tuple[RedFlag, ...]:
    """
    Compare each component to its threshold.

    Comparisons are strict; a value exactly at the threshold does not
    flag. Flags come back in model order, not sorted by severity.

    Args:
        components: The eight indices
        params: Model parameters

    Returns:
        Tuple of RedFlag
    """
    flags = []
    for spec in params.components:
        value = getattr(components, spec.name)
        if spec.is_flagged(value):
            flags.append(RedFlag(
                component=spec.name,
                value=value,
                threshold=spec.threshold,
                message=spec.message,
                severity=spec.severity,
            ))
    return tuple(flags)


def compute_score(
    data: FinancialData,
    variant: FormulaVariant = FormulaVariant.SIMPLIFIED,
    division: DivisionPolicy = DivisionPolicy.RAISE,
    params: ModelParameters = BENEISH_MODEL,
) -> MScoreResult:
    """
    Compute the full M-Score assessment for one record.

    Args:
        data: Validated two-period financial data
        variant: Formula variant for GMI, TATA and LVGI
        division: Zero / non-finite denominator policy
        params: Model parameters

    Returns:
        MScoreResult

    Raises:
        ScoreComputationError: Under DivisionPolicy.RAISE when any
            ratio or the composite score is not computable

    Example:
        result = compute_score(data)
        print(result.m_score, result.interpretation.value)
    """
    variant = FormulaVariant(variant)
    division = DivisionPolicy(division)

    components, details = compute_components(data, variant, division, params)
    m_score, contributions = weigh_components(components, params)

    if not math.isfinite(m_score):
        if division == DivisionPolicy.RAISE:
            raise ScoreComputationError('m_score', m_score, 1.0)
        m_score = 0.0

    interpretation, likelihood = classify_score(m_score, params)

    return MScoreResult(
        m_score=m_score,
        components=components,
        interpretation=interpretation,
        fraud_likelihood=likelihood,
        red_flags=detect_red_flags(components, params),
        contributions=contributions,
        details=details,
        formula_variant=variant,
    )


__all__ = [
    'compute_score',
    'compute_components',
    'classify_score',
    'detect_red_flags',
    'weigh_components',
]
