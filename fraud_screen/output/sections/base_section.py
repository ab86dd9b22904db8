# Path: fraud_screen/output/sections/base_section.py
"""
Base Section Producer

Abstract base class for all section producers.
Each subclass converts part of a ScreeningOutcome into
one or more ReportSection instances.

To add a new section:
1. Subclass BaseSection
2. Implement produce()
3. Register via SectionRegistry.register()
"""

from abc import ABC, abstractmethod
from typing import List

from ..report_models import ReportSection


class BaseSection(ABC):
    """Abstract base for section producers."""

    @property
    @abstractmethod
    def section_type(self) -> str:
        """Unique type identifier for this section producer."""

    @abstractmethod
    def produce(self, outcome, **kwargs) -> List[ReportSection]:
        """
        Produce report sections from a screening outcome.

        Args:
            outcome: ScreeningOutcome from MScoreScreener
            **kwargs: Additional context (e.g., catalog)

        Returns:
            List of ReportSection instances
        """


__all__ = ['BaseSection']
