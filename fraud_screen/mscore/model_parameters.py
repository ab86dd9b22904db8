# Path: fraud_screen/mscore/model_parameters.py
"""
Beneish M-Score Model Parameters

One immutable table holding every published constant of the
eight-variable Beneish (1999) model as used by the screening engine:
intercept, per-component coefficient, red-flag threshold, direction,
severity and message, the two risk cut-offs and the fraud-likelihood
display heuristic.

These values are part of the model definition and are
not exposed through ConfigLoader.

Coefficients are stored signed (SGAI and LVGI are negative). The engine
accumulates `score += coefficient * value` in component order, which is
bit-identical to writing the subtraction out by hand.
"""

from dataclasses import dataclass
from typing import Optional

from constants import FlagDirection, FlagSeverity, FormulaVariant


@dataclass(frozen=True)
class ComponentSpec:
    """
    Parameters of one M-Score component.

    Attributes:
        name: Lower-case component key ('dsri', 'gmi', ...)
        label: Human-readable index name
        coefficient: Signed weight in the composite score
        threshold: Red-flag threshold
        direction: Risky direction relative to threshold
        severity: Severity tier of the red flag
        message: Fixed red-flag message text
        formula: Formula text of the simplified variant
        canonical_formula: Formula text of the canonical variant,
                           None when both variants agree
    """
    name: str
    label: str
    coefficient: float
    threshold: float
    direction: FlagDirection
    severity: FlagSeverity
    message: str
    formula: str
    canonical_formula: Optional[str] = None

    def is_flagged(self, value: float) -> bool:
        """Strict comparison against the threshold in the risky direction."""
        if self.direction == FlagDirection.ABOVE:
            return value > self.threshold
        return value < self.threshold

    def formula_for(self, variant: FormulaVariant) -> str:
        """Formula text for the given variant."""
        if variant == FormulaVariant.CANONICAL and self.canonical_formula:
            return self.canonical_formula
        return self.formula


@dataclass(frozen=True)
class ModelParameters:
    """
    Complete parameter set of the M-Score model.

    Attributes:
        intercept: Constant term of the composite score
        components: Component specs in fixed model order
        high_risk_cutoff: Scores strictly above this are HIGH_RISK
        low_risk_cutoff: Scores at or below this are LOW_RISK
        moderate_band_width: Width of the MODERATE_RISK band
        high_base / high_slope: Likelihood = base + (m - high cutoff) * slope
        moderate_base / moderate_slope: Likelihood = base
            + ((m - low cutoff) / band width) * slope
        low_base / low_slope: Likelihood = base + (m - low cutoff) * slope
        likelihood_min: Lower bound of the likelihood heuristic
        likelihood_max: Upper bound of the likelihood heuristic
    """
    intercept: float
    components: tuple[ComponentSpec, ...]
    high_risk_cutoff: float
    low_risk_cutoff: float
    moderate_band_width: float
    high_base: float
    high_slope: float
    moderate_base: float
    moderate_slope: float
    low_base: float
    low_slope: float
    likelihood_min: float
    likelihood_max: float

    @property
    def component_names(self) -> tuple[str, ...]:
        """Component keys in model order."""
        return tuple(spec.name for spec in self.components)

    def component(self, name: str) -> ComponentSpec:
        """
        Look up a component spec by key.

        Raises:
            KeyError: If the component does not exist
        """
        for spec in self.components:
            if spec.name == name:
                return spec
        raise KeyError(name)


# ==============================================================================
# THE MODEL
# ==============================================================================

BENEISH_MODEL = ModelParameters(
    intercept=-4.84,
    components=(
        ComponentSpec(
            name='dsri',
            label='Days Sales in Receivables Index',
            coefficient=0.92,
            threshold=1.031,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.HIGH,
            message=(
                'High DSRI: receivables are growing faster than sales'
                ' - possible revenue inflation'
            ),
            formula='(Receivables_t / Sales_t) / (Receivables_t-1 / Sales_t-1)',
        ),
        ComponentSpec(
            name='gmi',
            label='Gross Margin Index',
            coefficient=0.528,
            threshold=1.041,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.MODERATE,
            message=(
                'High GMI: gross margin is deteriorating'
                ' - may signal future problems'
            ),
            formula=(
                '((Sales_t-1 - GrossProfit_t-1) / Sales_t-1)'
                ' / ((Sales_t - GrossProfit_t) / Sales_t)'
            ),
            canonical_formula='(GrossProfit_t-1 / Sales_t-1) / (GrossProfit_t / Sales_t)',
        ),
        ComponentSpec(
            name='aqi',
            label='Asset Quality Index',
            coefficient=0.404,
            threshold=1.039,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.MODERATE,
            message=(
                'High AQI: soft assets are increasing'
                ' - possible capitalisation of costs'
            ),
            formula=(
                '(1 - (CurrentAssets_t + PPE_t) / TotalAssets_t)'
                ' / (1 - (CurrentAssets_t-1 + PPE_t-1) / TotalAssets_t-1)'
            ),
        ),
        ComponentSpec(
            name='sgi',
            label='Sales Growth Index',
            coefficient=0.892,
            threshold=1.134,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.MODERATE,
            message=(
                'High SGI: very rapid sales growth'
                ' - increases the incentive to manipulate'
            ),
            formula='Sales_t / Sales_t-1',
        ),
        ComponentSpec(
            name='depi',
            label='Depreciation Index',
            coefficient=0.115,
            threshold=1.077,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.MODERATE,
            message=(
                'High DEPI: depreciation is slowing'
                ' - assets may be overvalued'
            ),
            formula=(
                '(Dep_t-1 / (PPE_t-1 + Dep_t-1))'
                ' / (Dep_t / (PPE_t + Dep_t))'
            ),
        ),
        ComponentSpec(
            name='sgai',
            label='SG&A Expense Index',
            coefficient=-0.172,
            threshold=0.893,
            direction=FlagDirection.BELOW,
            severity=FlagSeverity.LOW,
            message=(
                'Low SGAI: SG&A is falling relative to sales'
                ' - may not be sustainable'
            ),
            formula='(SGA_t / Sales_t) / (SGA_t-1 / Sales_t-1)',
        ),
        ComponentSpec(
            name='tata',
            label='Total Accruals to Total Assets',
            coefficient=4.679,
            threshold=0.018,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.HIGH,
            message=(
                'High TATA: high accruals suggest possible'
                ' earnings manipulation'
            ),
            formula='(OperatingIncome_t - OperatingCashFlow_t) / TotalAssets_t',
            canonical_formula=(
                '(dCurrentAssets - dCash - (dCurrentLiabilities - dTaxPayable)'
                ' - Dep_t) / TotalAssets_t'
            ),
        ),
        ComponentSpec(
            name='lvgi',
            label='Leverage Index',
            coefficient=-0.327,
            threshold=1.037,
            direction=FlagDirection.ABOVE,
            severity=FlagSeverity.MODERATE,
            message=(
                'High LVGI: leverage is increasing'
                ' - may indicate financial distress'
            ),
            formula=(
                '((LongTermDebt_t + CurrentAssets_t) / TotalAssets_t)'
                ' / ((LongTermDebt_t-1 + CurrentAssets_t-1) / TotalAssets_t-1)'
            ),
            canonical_formula=(
                '((LongTermDebt_t + CurrentLiabilities_t) / TotalAssets_t)'
                ' / ((LongTermDebt_t-1 + CurrentLiabilities_t-1) / TotalAssets_t-1)'
            ),
        ),
    ),
    high_risk_cutoff=-1.78,
    low_risk_cutoff=-2.22,
    moderate_band_width=0.44,
    high_base=50.0,
    high_slope=20.0,
    moderate_base=30.0,
    moderate_slope=20.0,
    low_base=30.0,
    low_slope=10.0,
    likelihood_min=5.0,
    likelihood_max=95.0,
)

COMPONENT_NAMES: tuple[str, ...] = BENEISH_MODEL.component_names


__all__ = [
    'ComponentSpec',
    'ModelParameters',
    'BENEISH_MODEL',
    'COMPONENT_NAMES',
]
