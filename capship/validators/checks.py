"""
capship Legality Checks

Each check is a pure function of a ``CheckContext`` returning
``(passed, diagnostics)``. Checks never read each other's output and never
raise for rule violations, so the validator can run all of them on every
design and report every failure together.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List, Set, Tuple

from capship.core.constants import (
    AMMO_FAMILY_NONE,
    AMMO_SHOT_MULTIPLIERS,
    MASS_DRIVER_MIN_TONNAGE,
    MIN_SHOTS_PER_WEAPON,
)
from capship.core.enums import (
    LATERAL_ARC_PAIRS,
    Arc,
    EquipmentFlag,
    HeatSinkType,
)
from capship.core.rounding import floor_int
from capship.weight import formulas
from .taxonomy import CheckContext

CheckOutcome = Tuple[bool, List[str]]


def _tons(value: float) -> str:
    return f"{float(value):.1f}"


# =============================================================================
# HULL
# =============================================================================

def check_tonnage(ctx: CheckContext) -> CheckOutcome:
    """Tonnage within the drive core's minimum and increment."""
    design, attrs = ctx.design, ctx.attributes
    diagnostics: List[str] = []

    if design.tonnage < attrs.min_tonnage:
        diagnostics.append(
            f"Minimum tonnage for a {design.drive_core.value} drive core "
            f"is {attrs.min_tonnage:,} tons."
        )
    if design.tonnage % attrs.weight_increment != 0:
        diagnostics.append(f"Tonnage must be a multiple of {attrs.weight_increment:,} tons.")

    return not diagnostics, diagnostics


def check_weight(ctx: CheckContext) -> CheckOutcome:
    """Sum of subsystem weights within the declared tonnage."""
    design, attrs = ctx.design, ctx.attributes
    if design.allow_overweight or ctx.allow_overweight_construction:
        return True, []
    if attrs.total_weight > design.tonnage:
        return False, [
            f"Weight: calculated {_tons(attrs.total_weight)} tons "
            f"is greater than the design tonnage of {_tons(design.tonnage)}"
        ]
    return True, []


# =============================================================================
# HEAT SINKS
# =============================================================================

def check_heat_sinks(ctx: CheckContext) -> CheckOutcome:
    """Installed heat sinks cover the engine's free allotment; type is legal."""
    design, attrs = ctx.design, ctx.attributes
    diagnostics: List[str] = []

    if design.heat_sinks < attrs.free_heat_sinks:
        diagnostics.append(
            f"Heat Sinks:\n Total     {design.heat_sinks}\n Required  {attrs.free_heat_sinks}"
        )

    valid_types = [t.value for t in HeatSinkType]
    if design.heat_sink_type not in valid_types:
        diagnostics.append(
            f"Invalid heatsink type!  Valid types are {' and '.join(valid_types)}.  "
            f"Found {design.heat_sink_type}."
        )

    return not diagnostics, diagnostics


# =============================================================================
# ARMOR
# =============================================================================

def check_armor(ctx: CheckContext) -> CheckOutcome:
    """
    Armor tonnage and points within the structural limits.

    A facing may hold the points its tonnage buys plus its share of free
    structural integrity armor.
    """
    design, attrs = ctx.design, ctx.attributes
    diagnostics: List[str] = []

    if design.armor_tonnage > attrs.max_armor_weight:
        diagnostics.append(
            f"Total armor, {_tons(design.armor_tonnage)} tons, is greater than "
            f"the maximum: {_tons(attrs.max_armor_weight)}"
        )

    free_per_facing = formulas.free_armor_points_per_facing(design)
    for facing in design.armor:
        limit = floor_int(facing.tonnage * attrs.armor_points_per_ton) + free_per_facing
        if facing.points > limit:
            diagnostics.append(
                f"{facing.arc.abbreviation} armor, {facing.points} points, "
                f"is greater than the maximum for {_tons(facing.tonnage)} tons: {limit}"
            )

    total_points = sum(facing.points for facing in design.armor)
    if total_points > attrs.max_armor_points:
        diagnostics.append(
            f"Total armor, {total_points} points, is greater than the maximum: "
            f"{attrs.max_armor_points}"
        )

    return not diagnostics, diagnostics


# =============================================================================
# EQUIPMENT COMBINATIONS
# =============================================================================

def _weapon_bay_diagnostics(ctx: CheckContext) -> List[str]:
    design, catalog = ctx.design, ctx.catalog
    diagnostics: List[str] = []

    for bay in design.weapon_bays:
        weapons_per_family: Dict[str, int] = {}
        shots_per_family: Dict[str, int] = {}
        weapon_count = 0

        for mount in design.bay_mounts(bay):
            equipment = catalog.lookup_equipment(mount.equipment_id)
            if equipment.is_weapon:
                weapon_count += 1
                if mount.one_shot or equipment.has_flag(EquipmentFlag.ONE_SHOT):
                    continue
                family = equipment.ammo_family
                weapons_per_family[family] = weapons_per_family.get(family, 0) + 1
            elif equipment.is_ammo:
                family = equipment.ammo_family
                shots_per_family[family] = shots_per_family.get(family, 0) + mount.shots

        if weapon_count == 0:
            diagnostics.append(f"Bay {bay.name} has no weapons")

        for family, count in weapons_per_family.items():
            if family == AMMO_FAMILY_NONE:
                continue
            needed = count * MIN_SHOTS_PER_WEAPON * AMMO_SHOT_MULTIPLIERS.get(family, 1)
            if shots_per_family.get(family, 0) < needed:
                diagnostics.append(
                    f"Bay {bay.name} does not have the minimum 10 shots of ammo for each weapon"
                )
                break

        for family in shots_per_family:
            if family not in weapons_per_family:
                diagnostics.append(f"Bay {bay.name} has ammo for a weapon not in the bay")
                break

    return diagnostics


def _lateral_loads_match(ctx: CheckContext) -> bool:
    loads = formulas.weapon_arc_loads(ctx.design, ctx.catalog)
    for _, left, right in LATERAL_ARC_PAIRS:
        if loads.get(left, Counter()) != loads.get(right, Counter()):
            return False
    return True


def check_equipment(ctx: CheckContext) -> CheckOutcome:
    """
    Weapon bay contents, hull equipment categories, mass driver placement,
    lateral symmetry and bay doors.
    """
    design, catalog, attrs = ctx.design, ctx.catalog, ctx.attributes
    profile = design.hull_profile
    diagnostics = _weapon_bay_diagnostics(ctx)

    for _, equipment in formulas.resolve_mounts(design, catalog):
        if equipment.is_misc:
            if not equipment.has_flag(profile.equipment_flag):
                diagnostics.append(f"Cannot mount {equipment.name}")
            continue
        if not equipment.is_weapon:
            continue

        if equipment.is_mass_driver and not profile.mass_driver_allowed:
            diagnostics.append("A mass driver may not be mounted on a Jumpship.")
        if not equipment.has_flag(EquipmentFlag.AERO_WEAPON):
            diagnostics.append(f"Cannot mount {equipment.name}")
        if equipment.is_mass_driver:
            minimum = MASS_DRIVER_MIN_TONNAGE.get(equipment.ammo_family)
            if minimum is not None and design.tonnage < minimum:
                diagnostics.append(
                    f"Minimum vessel tonnage for {equipment.name} is {minimum:,} tons"
                )

    if not _lateral_loads_match(ctx):
        diagnostics.append("Left and right side weapon loads do not match.")

    for arc, names in formulas.mass_drivers_by_arc(design, catalog).items():
        if profile.nose_only_mass_driver and arc is not Arc.NOSE:
            diagnostics.append("A warship may only mount a mass driver in the nose firing arc.")
        elif len(names) > 1:
            diagnostics.append("A ship may not mount more than one mass driver in a firing arc.")

    total_doors = 0
    for bay in design.transport_bays:
        total_doors += bay.doors
        if bay.doors == 0 and not (
            bay.bay_type.is_cargo or bay.bay_type.is_infantry or bay.bay_type.is_quarters
        ):
            diagnostics.append(
                "Transport bays other than cargo and infantry require at least one door."
            )
    if total_doors > attrs.max_bay_doors:
        diagnostics.append("Exceeds maximum number of bay doors.")

    return not diagnostics, diagnostics


# =============================================================================
# CREW
# =============================================================================

def check_crew(ctx: CheckContext) -> CheckOutcome:
    """Crew, officers and quarters meet the computed minimums."""
    design, attrs = ctx.design, ctx.attributes
    crew = design.crew
    diagnostics: List[str] = []

    crew_size = crew.crew - design.bay_personnel
    if crew_size < attrs.required_crew:
        diagnostics.append(f"Requires {attrs.required_crew} crew and only has {crew_size}")
    if crew.officers < attrs.required_officers:
        diagnostics.append(f"Requires at least {attrs.required_officers} officers")

    personnel = crew_size + crew.passengers + crew.marines + crew.battle_armor
    if attrs.quarters_capacity < personnel:
        diagnostics.append(
            f"Requires quarters for {personnel} crew but only has {attrs.quarters_capacity}"
        )

    return not diagnostics, diagnostics


# =============================================================================
# FACILITIES
# =============================================================================

def check_grav_decks(ctx: CheckContext) -> CheckOutcome:
    design, attrs = ctx.design, ctx.attributes
    diagnostics: List[str] = []

    if len(design.grav_decks) > attrs.max_grav_decks:
        diagnostics.append(f"Exceeds maximum {attrs.max_grav_decks} gravity decks.")
    if any(diameter > attrs.max_grav_deck_diameter for diameter in design.grav_decks):
        diagnostics.append(f"Maximum grav deck diameter is {attrs.max_grav_deck_diameter}")

    return not diagnostics, diagnostics


def check_bays(ctx: CheckContext) -> CheckOutcome:
    """
    Hardpoint bays on distinct armor facings; one repair facility unless a
    space station; docking collars within the hardpoint budget.
    """
    design, attrs = ctx.design, ctx.attributes
    diagnostics: List[str] = []

    facings: Set[Arc] = set()
    repair_count = 0
    for bay in design.transport_bays:
        if bay.hardpoint_cost <= 0:
            continue
        if bay.facing is None or not bay.facing.is_armor_facing:
            diagnostics.append(f"{bay.bay_type.label} is not assigned a legal armor facing.")
        elif bay.facing in facings:
            diagnostics.append(
                "Exceeds maximum of one repair facility or drop shuttle bay per armor facing."
            )
        if bay.facing is not None:
            facings.add(bay.facing)
        if bay.bay_type.is_repair_facility:
            repair_count += 1

    if repair_count > 1 and not design.hull_profile.multiple_repair_facilities:
        diagnostics.append("Only a space station may mount multiple naval repair facilities.")

    if design.docking_collars > attrs.max_docking_hardpoints:
        diagnostics.append(
            f"Exceeds maximum {attrs.max_docking_hardpoints} docking hard points."
        )

    return not diagnostics, diagnostics


# =============================================================================
# TECH LEGALITY
# =============================================================================

def check_tech_legality(ctx: CheckContext) -> CheckOutcome:
    """Every mounted equipment type and the armor type pass the oracle."""
    design, catalog = ctx.design, ctx.catalog
    diagnostics: List[str] = []

    seen: Set[str] = set()
    for _, equipment in formulas.resolve_mounts(design, catalog):
        if equipment.equipment_id in seen:
            continue
        seen.add(equipment.equipment_id)
        if not ctx.oracle.is_legal(equipment, ctx.tech_context):
            diagnostics.append(
                f"{equipment.name} is not legal in {ctx.tech_context.year} "
                f"({ctx.tech_context.tech_base.value})"
            )

    if design.armor_type is not None:
        armor = catalog.lookup_armor(design.armor_type)
        legal = formulas.legal_armors_for(design, catalog, ctx.oracle, ctx.tech_context)
        if armor not in legal:
            diagnostics.append(f"{armor.name} armor is not legal for this unit")

    return not diagnostics, diagnostics
