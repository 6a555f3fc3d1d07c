"""
capship Tech Legality

The engine does not own tech progression; it asks an injected oracle
whether an item is legal in a ruleset context. Two simple oracles are
provided for callers without one of their own.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable
import logging

from capship.core.enums import EquipmentFlag, TechBase
from .equipment import ArmorType, EquipmentType

logger = logging.getLogger(__name__)

CatalogItem = Union[EquipmentType, ArmorType]


@dataclass(frozen=True)
class TechContext:
    """Ruleset context for legality questions."""
    year: int = 3145
    tech_base: TechBase = TechBase.ALL
    allow_unofficial: bool = False


@runtime_checkable
class TechOracle(Protocol):
    """Answers whether an item may be used in a context."""

    def is_legal(self, item: CatalogItem, context: TechContext) -> bool:
        ...


class PermissiveTechOracle:
    """Treats every item as legal."""

    def is_legal(self, item: CatalogItem, context: TechContext) -> bool:
        return True


class IntroYearTechOracle:
    """
    Legal when introduced by the context year, on a compatible tech base,
    and official unless the context allows unofficial rules.
    """

    def is_legal(self, item: CatalogItem, context: TechContext) -> bool:
        if item.intro_year is not None and item.intro_year > context.year:
            logger.debug(f"{item.name} not available until {item.intro_year}")
            return False
        if (
            item.tech_base is not TechBase.ALL
            and context.tech_base is not TechBase.ALL
            and item.tech_base is not context.tech_base
        ):
            return False
        if item.has_flag(EquipmentFlag.UNOFFICIAL) and not context.allow_unofficial:
            return False
        return True
