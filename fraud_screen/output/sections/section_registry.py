# Path: fraud_screen/output/sections/section_registry.py
"""
Section Registry

Ordered, class-level registry of section producers. Registration
order is report order.

Usage:
    SectionRegistry.register(MySection)
    sections = SectionRegistry.build_all(outcome)
"""

from typing import Dict, List, Type

from ..report_models import ReportSection
from .base_section import BaseSection


class SectionRegistry:
    """Registry of section producers."""

    _producers: Dict[str, Type[BaseSection]] = {}
    _order: List[str] = []

    @classmethod
    def register(cls, producer_class: Type[BaseSection]) -> None:
        """
        Register a section producer; re-registering is a no-op.

        Args:
            producer_class: BaseSection subclass to register
        """
        key = producer_class().section_type
        if key not in cls._producers:
            cls._producers[key] = producer_class
            cls._order.append(key)

    @classmethod
    def unregister(cls, section_type: str) -> None:
        """Remove a registered producer."""
        cls._producers.pop(section_type, None)
        if section_type in cls._order:
            cls._order.remove(section_type)

    @classmethod
    def build_all(cls, outcome, **kwargs) -> List[ReportSection]:
        """
        Run all registered producers in order.

        Args:
            outcome: ScreeningOutcome
            **kwargs: Additional context passed to each producer

        Returns:
            Ordered list of ReportSection instances
        """
        sections = []
        for key in cls._order:
            producer = cls._producers[key]()
            sections.extend(producer.produce(outcome, **kwargs))
        return sections

    @classmethod
    def get_registered(cls) -> List[str]:
        """Return list of registered section type names."""
        return list(cls._order)

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._producers.clear()
        cls._order.clear()


__all__ = ['SectionRegistry']
