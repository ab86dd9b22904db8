# Path: fraud_screen/constants.py
"""
System-Wide Constants for fraud_screen

Central repository for constant values shared across the system.
Model parameters of the Beneish M-Score live in mscore/model_parameters.py;
this module holds the enums and display constants around them.

Constants are organized by category:
- Risk Interpretation
- Red Flag Severity and Direction
- Formula Variants and Division Policy
- Confidence Levels
- Statement Periods
- Output Formats
- Display Formatting
"""

from enum import Enum
from typing import Final


# ==============================================================================
# RISK INTERPRETATION
# ==============================================================================

class RiskInterpretation(str, Enum):
    """
    Three-tier classification of an M-Score, highest risk first.
    """
    HIGH_RISK = 'HIGH_RISK'
    MODERATE_RISK = 'MODERATE_RISK'
    LOW_RISK = 'LOW_RISK'


RISK_DISPLAY_NAMES: Final[dict[str, str]] = {
    'HIGH_RISK': 'High Risk',
    'MODERATE_RISK': 'Moderate Risk',
    'LOW_RISK': 'Low Risk',
}


# ==============================================================================
# RED FLAGS
# ==============================================================================

class FlagSeverity(str, Enum):
    """Severity tier attached to a red flag."""
    HIGH = 'high'
    MODERATE = 'moderate'
    LOW = 'low'


class FlagDirection(str, Enum):
    """
    Direction in which a ratio becomes risky.

    ABOVE flags when value > threshold, BELOW when value < threshold.
    """
    ABOVE = 'above'
    BELOW = 'below'


# ==============================================================================
# FORMULA VARIANTS AND DIVISION POLICY
# ==============================================================================

class FormulaVariant(str, Enum):
    """
    Which formulas to use for GMI, TATA and LVGI.

    SIMPLIFIED: the screening application's historical formulas
                (cost ratio GMI, operating accruals TATA, current
                assets in LVGI). Default.
    CANONICAL:  the published Beneish (1999) definitions.
    """
    SIMPLIFIED = 'simplified'
    CANONICAL = 'canonical'


class DivisionPolicy(str, Enum):
    """
    How the engine treats a zero or non-finite denominator.

    RAISE:   stop with ScoreComputationError. Default.
    NEUTRAL: substitute 1.0 for the quotient, as the screening
             application historically did.
    """
    RAISE = 'raise'
    NEUTRAL = 'neutral'


# ==============================================================================
# CONFIDENCE LEVELS
# ==============================================================================

class ConfidenceLevel(str, Enum):
    """
    Confidence levels for extracted field values.
    """
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'
    NONE = 'none'


# Confidence thresholds (scores 0-100)
CONFIDENCE_HIGH_MIN: Final[float] = 75.0
CONFIDENCE_MEDIUM_MIN: Final[float] = 50.0

# Confidence assigned per extraction method when a value was found
EXTRACTION_CONFIDENCE: Final[dict[str, float]] = {
    'ai': 95.0,
    'basic': 60.0,
    'manual': 100.0,
}


def get_confidence_level(
    score: float,
    high_min: float = CONFIDENCE_HIGH_MIN,
    medium_min: float = CONFIDENCE_MEDIUM_MIN,
) -> ConfidenceLevel:
    """
    Get confidence level from numeric score.

    Args:
        score: Confidence score (0-100)
        high_min: Minimum score for HIGH
        medium_min: Minimum score for MEDIUM

    Returns:
        ConfidenceLevel enum value
    """
    if score >= high_min:
        return ConfidenceLevel.HIGH
    elif score >= medium_min:
        return ConfidenceLevel.MEDIUM
    elif score > 0:
        return ConfidenceLevel.LOW
    else:
        return ConfidenceLevel.NONE


# ==============================================================================
# STATEMENT PERIODS
# ==============================================================================

class Period(str, Enum):
    """Reporting periods of a FinancialData record."""
    CURRENT = 'current'
    PRIOR = 'prior'


# ==============================================================================
# OUTPUT
# ==============================================================================

class OutputFormat(str, Enum):
    """Supported report output formats."""
    TEXT = 'text'
    JSON = 'json'
    CSV = 'csv'


# ==============================================================================
# DISPLAY FORMATTING
# ==============================================================================

# Menu formatting
MENU_WIDTH: Final[int] = 60
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

# Number formatting
SCORE_PLACES: Final[int] = 3
RATIO_PLACES: Final[int] = 4
PERCENTAGE_PLACES: Final[int] = 1

# Status indicators (ASCII only - no emojis)
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    # Enums
    'RiskInterpretation',
    'FlagSeverity',
    'FlagDirection',
    'FormulaVariant',
    'DivisionPolicy',
    'ConfidenceLevel',
    'Period',
    'OutputFormat',

    # Constants
    'RISK_DISPLAY_NAMES',
    'CONFIDENCE_HIGH_MIN',
    'CONFIDENCE_MEDIUM_MIN',
    'EXTRACTION_CONFIDENCE',

    # Display
    'MENU_WIDTH',
    'MENU_HEADER',
    'SCORE_PLACES',
    'RATIO_PLACES',
    'PERCENTAGE_PLACES',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',

    # Functions
    'get_confidence_level',
]
