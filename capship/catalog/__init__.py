"""
catalog/ - Reference Data

Equipment and armor records, the JSON catalog loader and the injected
tech-legality oracles.
"""

from .equipment import EquipmentType, ArmorType
from .schema import EquipmentRecord, ArmorRecord, CatalogDocument
from .catalog import ReferenceCatalog
from .tech import (
    TechContext,
    TechOracle,
    PermissiveTechOracle,
    IntroYearTechOracle,
)

__all__ = [
    # Records
    "EquipmentType",
    "ArmorType",
    # Schema
    "EquipmentRecord",
    "ArmorRecord",
    "CatalogDocument",
    # Catalog
    "ReferenceCatalog",
    # Tech legality
    "TechContext",
    "TechOracle",
    "PermissiveTechOracle",
    "IntroYearTechOracle",
]
