"""
capship Hull Profiles

Every hull-dependent constant lives on a frozen ``HullProfile``; formulas
look the profile up instead of branching on the hull class. Adding a hull
class means adding an enum member and a profile row.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .enums import ARMOR_FACINGS, Arc, EquipmentFlag, HullClass
from .constants import GRAV_DECK_HUGE_MAX, GRAV_DECK_LARGE_MAX
from capship.errors import create_invalid_hull_error


@dataclass(frozen=True)
class HullProfile:
    """
    Formula constants for one hull class.

    Attributes:
        label: Display prefix used in reports
        structure_divisor: SI x tonnage / divisor = structure tons
        armor_divisor: SI x tonnage / divisor (+ offset) = max armor tons
        armor_offset: Flat tons added to the armor ceiling
        slots_per_arc: Weapons per arc before fire control surcharge
        crew_base: Fixed crew before the tonnage term
        crew_divisor: Tonnage per additional crewman
        control_multiplier: Control system tons per hull ton
        sail_divisor: Tonnage per ton of jump sail (non-primitive)
        max_grav_deck_diameter: Largest legal grav deck (m)
        equipment_flag: Flag misc equipment must carry to be mounted
        station_keeping_drive: Hull uses a station-keeping drive
        mass_driver_allowed: Hull may mount mass drivers
        nose_only_mass_driver: Mass drivers restricted to the nose arc
        has_broadsides: Hull has left and right broadside arcs
        multiple_repair_facilities: Hull may mount more than one naval repair facility
    """
    label: str
    structure_divisor: float
    armor_divisor: float
    armor_offset: float
    slots_per_arc: int
    crew_base: int
    crew_divisor: float
    control_multiplier: float
    sail_divisor: float
    max_grav_deck_diameter: int
    equipment_flag: EquipmentFlag
    station_keeping_drive: bool
    mass_driver_allowed: bool
    nose_only_mass_driver: bool
    has_broadsides: bool
    multiple_repair_facilities: bool


HULL_PROFILES: Dict[HullClass, HullProfile] = {
    HullClass.JUMPSHIP: HullProfile(
        label="Jumpship",
        structure_divisor=150.0,
        armor_divisor=1800.0,
        armor_offset=0.0,
        slots_per_arc=12,
        crew_base=6,
        crew_divisor=20000.0,
        control_multiplier=0.0025,
        sail_divisor=7500.0,
        max_grav_deck_diameter=GRAV_DECK_LARGE_MAX,
        equipment_flag=EquipmentFlag.JS_EQUIPMENT,
        station_keeping_drive=True,
        mass_driver_allowed=False,
        nose_only_mass_driver=False,
        has_broadsides=False,
        multiple_repair_facilities=False,
    ),
    HullClass.WARSHIP: HullProfile(
        label="Warship",
        structure_divisor=1000.0,
        armor_divisor=50000.0,
        armor_offset=0.0,
        slots_per_arc=20,
        crew_base=45,
        crew_divisor=5000.0,
        control_multiplier=0.0025,
        sail_divisor=20000.0,
        max_grav_deck_diameter=GRAV_DECK_LARGE_MAX,
        equipment_flag=EquipmentFlag.WS_EQUIPMENT,
        station_keeping_drive=False,
        mass_driver_allowed=True,
        nose_only_mass_driver=True,
        has_broadsides=True,
        multiple_repair_facilities=False,
    ),
    HullClass.SPACE_STATION: HullProfile(
        label="Space Station",
        structure_divisor=100.0,
        armor_divisor=300.0,
        armor_offset=60.0,
        slots_per_arc=20,
        crew_base=45,
        crew_divisor=5000.0,
        control_multiplier=0.001,
        sail_divisor=7500.0,
        max_grav_deck_diameter=GRAV_DECK_HUGE_MAX,
        equipment_flag=EquipmentFlag.SS_EQUIPMENT,
        station_keeping_drive=True,
        mass_driver_allowed=True,
        nose_only_mass_driver=False,
        has_broadsides=False,
        multiple_repair_facilities=True,
    ),
}


def get_hull_profile(hull_class: Any) -> HullProfile:
    """
    Look up the profile for a hull class.

    Raises:
        InvalidHullClassError: value is not a known ``HullClass``
    """
    try:
        return HULL_PROFILES[hull_class]
    except (KeyError, TypeError):
        raise create_invalid_hull_error(hull_class, source="core.hulls") from None


def hull_arcs(profile: HullProfile) -> Tuple[Arc, ...]:
    """Firing arcs present on a hull."""
    if profile.has_broadsides:
        return tuple(Arc)
    return ARMOR_FACINGS
