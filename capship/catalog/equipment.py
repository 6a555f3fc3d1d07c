"""
capship Catalog Records

Immutable reference data the engine queries: equipment types (weapons,
ammunition, misc systems) and armor types.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from capship.core.constants import AMMO_FAMILY_NONE
from capship.core.enums import (
    EquipmentFlag,
    EquipmentKind,
    HullClass,
    TechBase,
)


@dataclass(frozen=True)
class EquipmentType:
    """
    Static description of one equipment type.

    Attributes:
        equipment_id: Catalog key
        name: Display name
        kind: Weapon, ammo or misc
        tonnage: Mass per mount (per lot for ammo)
        flags: Category and weapon-class markers
        ammo_family: Ammunition family shared by weapons and their ammo
        shots_per_lot: Shots carried by one lot of ammo
        long_range: Long range bracket; 1 or less marks short-range-only weapons
        crew_requirement: Extra crew needed to operate the item
        intro_year: First year the item is available
        tech_base: Technology base
    """
    equipment_id: str
    name: str
    kind: EquipmentKind
    tonnage: float = 0.0
    flags: FrozenSet[EquipmentFlag] = frozenset()
    ammo_family: str = AMMO_FAMILY_NONE
    shots_per_lot: int = 0
    long_range: int = 0
    crew_requirement: int = 0
    intro_year: Optional[int] = None
    tech_base: TechBase = TechBase.ALL

    def has_flag(self, flag: EquipmentFlag) -> bool:
        return flag in self.flags

    @property
    def is_weapon(self) -> bool:
        return self.kind is EquipmentKind.WEAPON

    @property
    def is_ammo(self) -> bool:
        return self.kind is EquipmentKind.AMMO

    @property
    def is_misc(self) -> bool:
        return self.kind is EquipmentKind.MISC

    @property
    def is_mass_driver(self) -> bool:
        return self.is_weapon and self.has_flag(EquipmentFlag.MASS_DRIVER)

    @property
    def is_capital(self) -> bool:
        return self.has_flag(EquipmentFlag.CAPITAL)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "equipment_id": self.equipment_id,
            "name": self.name,
            "kind": self.kind.value,
            "tonnage": self.tonnage,
            "flags": sorted(f.value for f in self.flags),
            "ammo_family": self.ammo_family,
            "shots_per_lot": self.shots_per_lot,
            "long_range": self.long_range,
            "crew_requirement": self.crew_requirement,
            "intro_year": self.intro_year,
            "tech_base": self.tech_base.value,
        }


@dataclass(frozen=True)
class ArmorType:
    """
    Capital armor type.

    Points per ton depend on the hull class; a hull class missing from
    ``points_per_ton`` cannot use this armor.
    """
    armor_id: str
    name: str
    clan: bool = False
    flags: FrozenSet[EquipmentFlag] = frozenset()
    points_per_ton: Dict[HullClass, float] = field(default_factory=dict)
    intro_year: Optional[int] = None
    tech_base: TechBase = TechBase.ALL

    def has_flag(self, flag: EquipmentFlag) -> bool:
        return flag in self.flags

    @property
    def is_primitive(self) -> bool:
        return self.has_flag(EquipmentFlag.PRIMITIVE_ARMOR)

    def points_for(self, hull_class: HullClass) -> float:
        return self.points_per_ton.get(hull_class, 0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "armor_id": self.armor_id,
            "name": self.name,
            "clan": self.clan,
            "flags": sorted(f.value for f in self.flags),
            "points_per_ton": {h.value: v for h, v in self.points_per_ton.items()},
            "intro_year": self.intro_year,
            "tech_base": self.tech_base.value,
        }
