"""
capship Derived Attribute Formulas

Closed-form construction budgets for advanced aerospace hulls. Every
function is pure over an immutable ``UnitDesign`` (plus the reference
catalog where equipment data is needed) and names its rounding mode at the
call site.

Hull-dependent constants come from the design's ``HullProfile``; era
dependent multipliers come from the year tier tables in
``capship.core.constants``.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterator, List, Tuple
import math

from capship.core.constants import (
    BAY_DOOR_BASE,
    BAY_DOOR_TONNAGE_STEP,
    DOCKING_COLLAR_MIN_TONNAGE,
    DOCKING_COLLAR_TONNAGE_STEP,
    DOCKING_COLLAR_WEIGHT,
    DRIVE_CORE_PROFILES,
    FIRE_CONTROL_DIVISOR,
    FREE_ARMOR_SI_DIVISOR,
    FREE_HEAT_SINK_BASE,
    FUEL_PUMP_FRACTION,
    GRAV_DECK_BASE_COUNT,
    GRAV_DECK_HUGE_WEIGHT,
    GRAV_DECK_LARGE_MAX,
    GRAV_DECK_LARGE_WEIGHT,
    GRAV_DECK_STANDARD_MAX,
    GRAV_DECK_STANDARD_WEIGHT,
    GRAV_DECK_TONNAGE_STEP,
    HEAT_SINK_WEIGHT,
    ARMOR_FACING_COUNT,
    CREW_PER_OFFICER,
    LF_BATTERY_FRACTION,
    LIFE_BOAT_WEIGHT,
    MASS_DRIVER_SLOTS,
    NAVAL_C3_FIRE_CONTROL_FACTOR,
    PRIMITIVE_ARMOR_FACTOR,
    PRIMITIVE_CONTROL_MULTIPLIER,
    PRIMITIVE_ENGINE_MULTIPLIER,
    PRIMITIVE_SAIL_FORMULA,
    STANDARD_ENGINE_MULTIPLIER,
    STANDARD_WEAPONS_PER_GUNNER,
    STATION_KEEPING_MULTIPLIER,
)
from capship.core.design import EquipmentMount, UnitDesign
from capship.core.enums import Arc, EquipmentFlag, Granularity
from capship.core.hulls import hull_arcs
from capship.core.rounding import (
    ceil_int,
    ceil_weight,
    floor_int,
    floor_weight,
    round_int,
    round_weight,
)
from capship.catalog.catalog import ReferenceCatalog
from capship.catalog.equipment import ArmorType, EquipmentType
from capship.catalog.tech import TechContext, TechOracle


# =============================================================================
# EQUIPMENT HELPERS
# =============================================================================

def resolve_mounts(
    design: UnitDesign,
    catalog: ReferenceCatalog,
) -> Iterator[Tuple[EquipmentMount, EquipmentType]]:
    """
    Pair every mount with its catalog entry.

    Raises:
        UnknownEquipmentError: a mount references an id missing from the catalog
    """
    for mount in design.mounts:
        yield mount, catalog.lookup_equipment(mount.equipment_id)


def mount_tonnage(mount: EquipmentMount, equipment: EquipmentType) -> float:
    """Mount override if present, else the catalog tonnage."""
    return mount.tonnage if mount.tonnage is not None else equipment.tonnage


def uses_weapon_slot(equipment: EquipmentType) -> bool:
    if equipment.is_weapon:
        return True
    return equipment.is_misc and equipment.has_flag(EquipmentFlag.USES_WEAPON_SLOT)


def has_naval_c3(design: UnitDesign, catalog: ReferenceCatalog) -> bool:
    return any(
        equipment.is_misc and equipment.has_flag(EquipmentFlag.NAVAL_C3)
        for _, equipment in resolve_mounts(design, catalog)
    )


# =============================================================================
# HULL
# =============================================================================

def min_tonnage(design: UnitDesign) -> int:
    return DRIVE_CORE_PROFILES[design.drive_core].min_tonnage


def weight_increment(design: UnitDesign) -> int:
    return DRIVE_CORE_PROFILES[design.drive_core].weight_increment


def structure_weight(design: UnitDesign) -> float:
    """SI x tonnage over the hull divisor, rounded up to the half ton."""
    profile = design.hull_profile
    return ceil_weight(
        design.structural_integrity * design.tonnage / profile.structure_divisor,
        Granularity.HALF_TON,
    )


def control_weight(design: UnitDesign) -> float:
    if design.primitive:
        multiplier = PRIMITIVE_CONTROL_MULTIPLIER.lookup(design.original_year)
    else:
        multiplier = design.hull_profile.control_multiplier
    return ceil_weight(design.tonnage * multiplier, Granularity.TON)


# =============================================================================
# ARMOR
# =============================================================================

def max_armor_weight(design: UnitDesign) -> float:
    """
    Maximum armor tonnage from structural integrity.

    Warship: SI x tonnage / 50000; space station: SI x tonnage / 300 + 60;
    jumpship: SI x tonnage / 1800. Floored to the half ton.
    """
    profile = design.hull_profile
    raw = design.structural_integrity * design.tonnage / profile.armor_divisor
    return floor_weight(raw + profile.armor_offset, Granularity.HALF_TON)


def armor_points_per_ton(design: UnitDesign, catalog: ReferenceCatalog) -> float:
    """
    Points per ton of the design's armor for its hull class.

    Primitive hulls always use the catalog's primitive armor. A design with
    no armor type gets zero.

    Raises:
        MissingArmorTypeError: armor id (or primitive armor) not in the catalog
    """
    if design.primitive:
        return catalog.primitive_armor().points_for(design.hull_class)
    if design.armor_type is None:
        return 0.0
    return catalog.lookup_armor(design.armor_type).points_for(design.hull_class)


def free_armor_points(design: UnitDesign) -> int:
    """Ten percent of SI per facing, rounded normally."""
    return round_int(design.structural_integrity / FREE_ARMOR_SI_DIVISOR) * ARMOR_FACING_COUNT


def free_armor_points_per_facing(design: UnitDesign) -> int:
    """Free SI armor on a single facing; primitive hulls keep 0.66 of it, floored."""
    per_facing = round_int(design.structural_integrity / FREE_ARMOR_SI_DIVISOR)
    if design.primitive:
        return floor_int(per_facing * PRIMITIVE_ARMOR_FACTOR)
    return per_facing


def max_armor_points(design: UnitDesign, catalog: ReferenceCatalog) -> int:
    """
    Maximum armor points.

    Primitive hulls floor the armor term and the reduced free SI term
    separately before summing.
    """
    points_per_ton = armor_points_per_ton(design, catalog)
    max_weight = max_armor_weight(design)
    free_si = free_armor_points(design)
    if design.primitive:
        return floor_int(points_per_ton * max_weight) + floor_int(free_si * PRIMITIVE_ARMOR_FACTOR)
    return floor_int(points_per_ton * max_weight + free_si)


def armor_weight(design: UnitDesign) -> float:
    return design.armor_tonnage


# =============================================================================
# DRIVE
# =============================================================================

def engine_tonnage(design: UnitDesign) -> float:
    """
    Engine mass, rounded to the nearest half ton.

    Station-keeping drives take 1.2% of tonnage; otherwise tonnage x
    original thrust x the (era dependent for primitive hulls) multiplier.
    """
    if design.hull_profile.station_keeping_drive:
        raw = design.tonnage * STATION_KEEPING_MULTIPLIER
    elif design.primitive:
        multiplier = PRIMITIVE_ENGINE_MULTIPLIER.lookup(design.original_year)
        raw = design.tonnage * design.original_thrust * multiplier
    else:
        raw = design.tonnage * design.original_thrust * STANDARD_ENGINE_MULTIPLIER
    return round_weight(raw, Granularity.HALF_TON)


def kf_drive_weight(design: UnitDesign) -> float:
    fraction = DRIVE_CORE_PROFILES[design.drive_core].drive_fraction
    return ceil_weight(design.tonnage * fraction, Granularity.TON)


def lf_battery_weight(design: UnitDesign) -> float:
    if design.has_lf_battery:
        return design.tonnage * LF_BATTERY_FRACTION
    return 0.0


def sail_weight(design: UnitDesign) -> float:
    if not design.has_sail:
        return 0.0
    if design.primitive:
        divisor, flat = PRIMITIVE_SAIL_FORMULA.lookup(design.original_year)
    else:
        divisor, flat = design.hull_profile.sail_divisor, 30
    return float(ceil_int(design.tonnage / divisor) + flat)


def fuel_weight(design: UnitDesign) -> float:
    """Fuel plus 2% pumps and tankage, pumps rounded up to the next ton."""
    pumps = ceil_weight(design.fuel_tonnage * FUEL_PUMP_FRACTION, Granularity.TON)
    return design.fuel_tonnage + pumps


# =============================================================================
# HEAT SINKS
# =============================================================================

def free_heat_sinks(design: UnitDesign) -> int:
    """Heat sinks included in the engine weight."""
    factor = 1 if design.primitive else 2
    return floor_int(FREE_HEAT_SINK_BASE + math.sqrt(engine_tonnage(design) * factor))


def heat_sink_weight(design: UnitDesign) -> float:
    return max(design.heat_sinks - free_heat_sinks(design), 0) * HEAT_SINK_WEIGHT


# =============================================================================
# EQUIPMENT
# =============================================================================

def weapon_weight(design: UnitDesign, catalog: ReferenceCatalog) -> float:
    return sum(
        mount_tonnage(mount, equipment)
        for mount, equipment in resolve_mounts(design, catalog)
        if equipment.is_weapon
    )


def misc_weight(design: UnitDesign, catalog: ReferenceCatalog) -> float:
    return sum(
        mount_tonnage(mount, equipment)
        for mount, equipment in resolve_mounts(design, catalog)
        if equipment.is_misc
    )


def ammo_weight(design: UnitDesign, catalog: ReferenceCatalog) -> float:
    """
    Ammunition mass.

    A bay stores several lots in one slot: each located ammo mount costs its
    lot tonnage times the lots needed for its shots, rounded up to the half
    ton. One-shot ammo has no location and costs nothing.
    """
    weight = 0.0
    for mount, equipment in resolve_mounts(design, catalog):
        if not equipment.is_ammo or mount.arc is None:
            continue
        if equipment.shots_per_lot > 0:
            lots = ceil_int(mount.shots / equipment.shots_per_lot)
        else:
            lots = 1
        weight += ceil_weight(mount_tonnage(mount, equipment) * lots, Granularity.HALF_TON)
    return weight


def fire_control_by_arc(design: UnitDesign, catalog: ReferenceCatalog) -> Dict[Arc, float]:
    """
    Extra fire control tonnage per firing arc.

    Each weapon slot user counts one slot (mass drivers ten). Every full
    allowance beyond the first slot adds a tenth of the arc's weapon
    tonnage, rounded up to the half ton. A naval C3 system doubles it.
    """
    allowance = design.hull_profile.slots_per_arc
    slots: Counter = Counter()
    tonnage: Dict[Arc, float] = {}

    for mount, equipment in resolve_mounts(design, catalog):
        if not uses_weapon_slot(equipment) or mount.arc is None:
            continue
        slots[mount.arc] += MASS_DRIVER_SLOTS if equipment.is_mass_driver else 1
        tonnage[mount.arc] = tonnage.get(mount.arc, 0.0) + mount_tonnage(mount, equipment)

    factor = NAVAL_C3_FIRE_CONTROL_FACTOR if has_naval_c3(design, catalog) else 1
    arcs = list(hull_arcs(design.hull_profile))
    arcs.extend(arc for arc in slots if arc not in arcs)

    result: Dict[Arc, float] = {}
    for arc in arcs:
        excess = max(slots[arc] - 1, 0) // allowance
        extra = 0.0
        if excess > 0:
            extra = ceil_weight(excess * tonnage[arc] / FIRE_CONTROL_DIVISOR, Granularity.HALF_TON)
        result[arc] = extra * factor
    return result


def fire_control_weight(design: UnitDesign, catalog: ReferenceCatalog) -> float:
    return sum(fire_control_by_arc(design, catalog).values())


# =============================================================================
# BAYS, COLLARS, DECKS, SMALL CRAFT
# =============================================================================

def carrying_space_weight(design: UnitDesign) -> float:
    return sum(bay.tonnage for bay in design.transport_bays if not bay.bay_type.is_quarters)


def quarters_weight(design: UnitDesign) -> float:
    return sum(bay.tonnage for bay in design.transport_bays if bay.bay_type.is_quarters)


def quarters_capacity(design: UnitDesign) -> int:
    return int(sum(bay.capacity for bay in design.transport_bays if bay.bay_type.is_quarters))


def hardpoint_weight(design: UnitDesign) -> float:
    return float(design.docking_collars * DOCKING_COLLAR_WEIGHT)


def max_docking_hardpoints(design: UnitDesign) -> int:
    """
    Docking collars the hull may mount.

    None under 50,000 tons; drop shuttle bays and naval repair facilities
    each use up two.
    """
    if design.tonnage < DOCKING_COLLAR_MIN_TONNAGE:
        return 0
    maximum = ceil_int(design.tonnage / DOCKING_COLLAR_TONNAGE_STEP)
    maximum -= sum(bay.hardpoint_cost for bay in design.transport_bays)
    return max(maximum, 0)


def max_bay_doors(design: UnitDesign) -> int:
    return BAY_DOOR_BASE + ceil_int(design.tonnage / BAY_DOOR_TONNAGE_STEP)


def grav_deck_tier_counts(design: UnitDesign) -> Tuple[int, int, int]:
    """(standard, large, huge) deck counts by diameter."""
    standard = sum(1 for d in design.grav_decks if d <= GRAV_DECK_STANDARD_MAX)
    large = sum(1 for d in design.grav_decks if GRAV_DECK_STANDARD_MAX < d <= GRAV_DECK_LARGE_MAX)
    huge = len(design.grav_decks) - standard - large
    return standard, large, huge


def grav_deck_weight(design: UnitDesign) -> float:
    standard, large, huge = grav_deck_tier_counts(design)
    return float(
        standard * GRAV_DECK_STANDARD_WEIGHT
        + large * GRAV_DECK_LARGE_WEIGHT
        + huge * GRAV_DECK_HUGE_WEIGHT
    )


def max_grav_decks(design: UnitDesign) -> int:
    return GRAV_DECK_BASE_COUNT + ceil_int(design.tonnage / GRAV_DECK_TONNAGE_STEP)


def max_grav_deck_diameter(design: UnitDesign) -> int:
    return design.hull_profile.max_grav_deck_diameter


def life_boat_weight(design: UnitDesign) -> float:
    return float((design.lifeboats + design.escape_pods) * LIFE_BOAT_WEIGHT)


# =============================================================================
# CREW
# =============================================================================

def minimum_base_crew(design: UnitDesign, catalog: ReferenceCatalog) -> int:
    """Hull crew plus the crew needed to operate misc equipment."""
    profile = design.hull_profile
    crew = profile.crew_base + ceil_int(design.tonnage / profile.crew_divisor)
    for _, equipment in resolve_mounts(design, catalog):
        if equipment.is_misc:
            crew += equipment.crew_requirement
    return crew


def required_gunners(design: UnitDesign, catalog: ReferenceCatalog) -> int:
    """
    One gunner per capital weapon and per six standard weapons.

    Mass drivers need ten. Short-range-only weapons need none.
    """
    capital = 0
    standard = 0
    for _, equipment in resolve_mounts(design, catalog):
        if not equipment.is_weapon or equipment.long_range <= 1:
            continue
        if equipment.is_mass_driver:
            capital += MASS_DRIVER_SLOTS
        elif equipment.is_capital or equipment.has_flag(EquipmentFlag.SCREEN_LAUNCHER):
            capital += 1
        else:
            standard += 1
    return capital + ceil_int(standard / STANDARD_WEAPONS_PER_GUNNER)


def required_officers(required_crew: int) -> int:
    return ceil_int(required_crew / CREW_PER_OFFICER)


# =============================================================================
# AGGREGATES
# =============================================================================

def weapon_arc_loads(
    design: UnitDesign,
    catalog: ReferenceCatalog,
) -> Dict[Arc, Counter]:
    """Weapon type multiset per arc."""
    loads: Dict[Arc, Counter] = {}
    for mount, equipment in resolve_mounts(design, catalog):
        if equipment.is_weapon and mount.arc is not None:
            loads.setdefault(mount.arc, Counter())[equipment.equipment_id] += 1
    return loads


def mass_drivers_by_arc(design: UnitDesign, catalog: ReferenceCatalog) -> Dict[Arc, List[str]]:
    drivers: Dict[Arc, List[str]] = {}
    for mount, equipment in resolve_mounts(design, catalog):
        if equipment.is_mass_driver and mount.arc is not None:
            drivers.setdefault(mount.arc, []).append(equipment.name)
    return drivers


def legal_armors_for(
    design: UnitDesign,
    catalog: ReferenceCatalog,
    oracle: TechOracle,
    context: TechContext,
) -> List[ArmorType]:
    """Armor types the design's hull may use under the oracle."""
    return catalog.armor_types_for(oracle, context, primitive=design.primitive)
