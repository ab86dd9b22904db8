# Path: fraud_screen/mscore/screening.py
"""
M-Score Screener

Orchestrates one screening run: validate the record, compute the
score, log the outcome on the PROCESS layer.

The engine itself is pure; this is where configuration and logging
meet it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from config_loader import ConfigLoader
from constants import DivisionPolicy, FormulaVariant
from core.logger.ipo_logging import get_process_logger

from .financial_data import FinancialData
from .score_engine import compute_score
from .score_models import MScoreResult
from .validation import ValidationReport, require_scoreable


logger = get_process_logger('screening')


@dataclass(frozen=True)
class ScreeningOutcome:
    """
    Result of screening one company.

    Attributes:
        data: The record that was scored
        result: Engine output
        validation: Validation report (warnings only)
        screened_at: ISO timestamp of the run
    """
    data: FinancialData
    result: MScoreResult
    validation: ValidationReport
    screened_at: str = field(
        default_factory=lambda: datetime.now().isoformat(timespec='seconds')
    )

    @property
    def company_name(self) -> str:
        return self.data.company_name

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dictionary of the whole outcome."""
        return {
            'company_name': self.data.company_name,
            'financial_year': self.data.financial_year,
            'screened_at': self.screened_at,
            'input': self.data.to_dict(),
            'validation': self.validation.to_dict(),
            'result': self.result.to_dict(),
        }


class MScoreScreener:
    """
    Validate-then-score orchestrator.

    Formula variant and division policy come from configuration unless
    given explicitly.

    Example:
        screener = MScoreScreener()
        outcome = screener.screen(data)
        print(outcome.result.interpretation.value)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        variant: Optional[FormulaVariant] = None,
        division: Optional[DivisionPolicy] = None,
    ):
        """
        Initialize screener.

        Args:
            config: Optional ConfigLoader (creates one if not provided)
            variant: Formula variant override
            division: Division policy override
        """
        self.config = config or ConfigLoader()
        self.variant = FormulaVariant(
            variant or self.config.get('formula_variant', FormulaVariant.SIMPLIFIED)
        )
        self.division = DivisionPolicy(
            division or self.config.get('division_policy', DivisionPolicy.RAISE)
        )

    def screen(self, data: FinancialData) -> ScreeningOutcome:
        """
        Validate and score one record.

        Args:
            data: Two-period financial data

        Returns:
            ScreeningOutcome

        Raises:
            InvalidFinancialDataError: If the record is unscoreable
            ScoreComputationError: If a ratio cannot be computed under
                DivisionPolicy.RAISE
        """
        name = data.company_name or '<unnamed>'
        logger.info(
            f"Screening {name} ({data.financial_year}) "
            f"variant={self.variant.value} division={self.division.value}"
        )

        try:
            report = require_scoreable(data, self.variant)
        except ValueError as e:
            logger.error(f"Validation failed for {name}: {e}")
            raise

        for warning in report.warnings:
            logger.warning(f"{name}: {warning}")

        try:
            result = compute_score(data, self.variant, self.division)
        except ArithmeticError as e:
            logger.error(f"Score computation failed for {name}: {e}")
            raise

        logger.info(
            f"{name}: M-Score {result.m_score:.3f} -> "
            f"{result.interpretation.value} "
            f"(likelihood {result.fraud_likelihood:.1f}%, "
            f"{len(result.red_flags)} red flags)"
        )
        for flag in result.red_flags:
            logger.debug(
                f"{name}: red flag {flag.component}={flag.value:.4f} "
                f"threshold={flag.threshold} severity={flag.severity.value}"
            )

        return ScreeningOutcome(data=data, result=result, validation=report)


__all__ = ['MScoreScreener', 'ScreeningOutcome']
