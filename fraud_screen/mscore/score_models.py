# Path: fraud_screen/mscore/score_models.py
"""
Score Models

Immutable result types produced by the M-Score engine and consumed by
the screener, the report generator and persistence callers.

MScoreResult.to_dict() produces the stored shape: top-level score,
interpretation and likelihood, a nested components object and an array
of red-flag objects. MScoreResult.from_dict() rebuilds the value.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Optional

from constants import FlagSeverity, FormulaVariant, RiskInterpretation


@dataclass(frozen=True)
class MScoreComponents:
    """
    The eight Beneish indices.

    Attributes:
        dsri: Days Sales in Receivables Index
        gmi: Gross Margin Index
        aqi: Asset Quality Index
        sgi: Sales Growth Index
        depi: Depreciation Index
        sgai: SG&A Expense Index
        tata: Total Accruals to Total Assets
        lvgi: Leverage Index
    """
    dsri: float
    gmi: float
    aqi: float
    sgi: float
    depi: float
    sgai: float
    tata: float
    lvgi: float

    def items(self) -> list[tuple[str, float]]:
        """(name, value) pairs in model order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class RedFlag:
    """
    A single component that crossed its threshold in the risky direction.

    Attributes:
        component: Component key ('dsri', ...)
        value: Computed component value
        threshold: Threshold it was compared against
        message: Fixed explanatory text
        severity: Severity tier
    """
    component: str
    value: float
    threshold: float
    message: str
    severity: FlagSeverity

    def to_dict(self) -> dict[str, Any]:
        return {
            'component': self.component,
            'value': self.value,
            'threshold': self.threshold,
            'message': self.message,
            'severity': self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RedFlag':
        return cls(
            component=data['component'],
            value=data['value'],
            threshold=data['threshold'],
            message=data['message'],
            severity=FlagSeverity(data['severity']),
        )


@dataclass(frozen=True)
class ScoreContribution:
    """
    One term of the composite score.

    The intercept is represented with component='intercept',
    coefficient=1.0 and value equal to the intercept.

    Attributes:
        component: Component key or 'intercept'
        coefficient: Signed model coefficient
        value: Component value
        weighted: coefficient * value
    """
    component: str
    coefficient: float
    value: float
    weighted: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ScoreContribution':
        return cls(**data)


@dataclass(frozen=True)
class RatioDetail:
    """
    How a component was derived: the two sub-ratios it divides.

    Attributes:
        name: Component key
        numerator: First sub-ratio (current period for most indices)
        denominator: Second sub-ratio
        value: numerator / denominator as used by the score
        formula: Formula text for the variant used
    """
    name: str
    numerator: float
    denominator: float
    value: float
    formula: str = ''

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RatioDetail':
        return cls(**data)


@dataclass(frozen=True)
class MScoreResult:
    """
    Complete result of one M-Score computation.

    Attributes:
        m_score: Composite score
        components: The eight indices
        interpretation: Risk tier
        fraud_likelihood: Display heuristic in [5, 95], not a probability
        red_flags: Flags in fixed component order
        contributions: Intercept followed by each weighted component
        details: Sub-ratio breakdown per component
        formula_variant: Variant that produced the result
    """
    m_score: float
    components: MScoreComponents
    interpretation: RiskInterpretation
    fraud_likelihood: float
    red_flags: tuple[RedFlag, ...] = ()
    contributions: tuple[ScoreContribution, ...] = ()
    details: tuple[RatioDetail, ...] = ()
    formula_variant: FormulaVariant = FormulaVariant.SIMPLIFIED

    @property
    def flagged_components(self) -> tuple[str, ...]:
        """Component keys that raised a red flag."""
        return tuple(flag.component for flag in self.red_flags)

    def detail(self, name: str) -> Optional[RatioDetail]:
        """Sub-ratio breakdown for a component, if recorded."""
        for item in self.details:
            if item.name == name:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-compatible dictionary.

        Returns:
            Dictionary in the stored result shape
        """
        return {
            'm_score': self.m_score,
            'interpretation': self.interpretation.value,
            'fraud_likelihood': self.fraud_likelihood,
            'formula_variant': self.formula_variant.value,
            'components': self.components.to_dict(),
            'red_flags': [flag.to_dict() for flag in self.red_flags],
            'contributions': [c.to_dict() for c in self.contributions],
            'details': [d.to_dict() for d in self.details],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'MScoreResult':
        """
        Rebuild a result from its dictionary form.

        Args:
            data: Output of to_dict()

        Raises:
            KeyError: If a required key is missing
            ValueError: If an enum value is not recognised
        """
        return cls(
            m_score=data['m_score'],
            components=MScoreComponents(**data['components']),
            interpretation=RiskInterpretation(data['interpretation']),
            fraud_likelihood=data['fraud_likelihood'],
            red_flags=tuple(RedFlag.from_dict(f) for f in data.get('red_flags', [])),
            contributions=tuple(
                ScoreContribution.from_dict(c) for c in data.get('contributions', [])
            ),
            details=tuple(RatioDetail.from_dict(d) for d in data.get('details', [])),
            formula_variant=FormulaVariant(
                data.get('formula_variant', FormulaVariant.SIMPLIFIED.value)
            ),
        )


__all__ = [
    'MScoreComponents',
    'RedFlag',
    'ScoreContribution',
    'RatioDetail',
    'MScoreResult',
]
