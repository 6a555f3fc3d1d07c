"""
capship/catalog/schema.py - Pydantic Catalog Records

Validated shapes for reference catalog documents loaded from JSON. Records
convert to the engine's frozen dataclasses once validated.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from capship.core.constants import AMMO_FAMILY_NONE
from capship.core.enums import EquipmentFlag, EquipmentKind, HullClass, TechBase
from .equipment import ArmorType, EquipmentType


# =============================================================================
# Equipment
# =============================================================================


class EquipmentRecord(BaseModel):
    """One weapon, ammunition or misc equipment entry."""

    equipment_id: str = Field(..., min_length=1, description="Catalog key")
    name: str = Field(..., description="Display name")
    kind: EquipmentKind = Field(..., description="weapon, ammo or misc")
    tonnage: float = Field(default=0.0, ge=0.0, description="Tons per mount or lot")
    flags: List[EquipmentFlag] = Field(default_factory=list)
    ammo_family: str = Field(default=AMMO_FAMILY_NONE)
    shots_per_lot: int = Field(default=0, ge=0)
    long_range: int = Field(default=0, ge=0)
    crew_requirement: int = Field(default=0, ge=0)
    intro_year: Optional[int] = Field(None, description="First year available")
    tech_base: TechBase = Field(default=TechBase.ALL)

    def to_equipment_type(self) -> EquipmentType:
        return EquipmentType(
            equipment_id=self.equipment_id,
            name=self.name,
            kind=self.kind,
            tonnage=self.tonnage,
            flags=frozenset(self.flags),
            ammo_family=self.ammo_family.lower(),
            shots_per_lot=self.shots_per_lot,
            long_range=self.long_range,
            crew_requirement=self.crew_requirement,
            intro_year=self.intro_year,
            tech_base=self.tech_base,
        )


# =============================================================================
# Armor
# =============================================================================


class ArmorRecord(BaseModel):
    """One capital armor entry."""

    armor_id: str = Field(..., min_length=1)
    name: str
    clan: bool = False
    flags: List[EquipmentFlag] = Field(default_factory=list)
    points_per_ton: Dict[HullClass, float] = Field(
        default_factory=dict, description="Armor points per ton by hull class"
    )
    intro_year: Optional[int] = None
    tech_base: TechBase = Field(default=TechBase.ALL)

    def to_armor_type(self) -> ArmorType:
        return ArmorType(
            armor_id=self.armor_id,
            name=self.name,
            clan=self.clan,
            flags=frozenset(self.flags),
            points_per_ton=dict(self.points_per_ton),
            intro_year=self.intro_year,
            tech_base=self.tech_base,
        )


# =============================================================================
# Document
# =============================================================================


class CatalogDocument(BaseModel):
    """Top-level catalog file."""

    version: str = "1.0"
    equipment: List[EquipmentRecord] = Field(default_factory=list)
    armor: List[ArmorRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "CatalogDocument":
        for label, ids in (
            ("equipment", [r.equipment_id for r in self.equipment]),
            ("armor", [r.armor_id for r in self.armor]),
        ):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {label} ids: {', '.join(duplicates)}")
        return self
