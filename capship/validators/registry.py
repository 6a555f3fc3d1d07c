"""
Check Registry - the ordered legality battery.

Order matters only for the sequence of diagnostics in the report; no check
depends on another's result.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from .taxonomy import CheckCategory, CheckDefinition, LegalityCheck
from . import checks


DEFAULT_CHECKS: Tuple[LegalityCheck, ...] = (
    LegalityCheck(
        CheckDefinition(
            check_id="hull/tonnage",
            name="Tonnage",
            description="Tonnage meets the drive core minimum and increment",
            category=CheckCategory.HULL,
        ),
        checks.check_tonnage,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="weight/budget",
            name="Weight Budget",
            description="Subsystem weights fit within the declared tonnage",
            category=CheckCategory.WEIGHT,
        ),
        checks.check_weight,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="heat/sinks",
            name="Heat Sinks",
            description="Heat sink count covers the engine allotment and type is valid",
            category=CheckCategory.HEAT,
        ),
        checks.check_heat_sinks,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="armor/allocation",
            name="Armor",
            description="Armor tonnage and points within structural limits",
            category=CheckCategory.ARMOR,
        ),
        checks.check_armor,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="equipment/combinations",
            name="Equipment Combinations",
            description="Bay ammo ratios, hull equipment, mass drivers, lateral symmetry, doors",
            category=CheckCategory.EQUIPMENT,
        ),
        checks.check_equipment,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="crew/quarters",
            name="Crew and Quarters",
            description="Crew, officers and quarters meet the computed minimums",
            category=CheckCategory.CREW,
        ),
        checks.check_crew,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="facilities/grav_decks",
            name="Gravity Decks",
            description="Gravity deck count and diameter within hull limits",
            category=CheckCategory.FACILITIES,
        ),
        checks.check_grav_decks,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="facilities/bays",
            name="Bays and Facings",
            description="Hardpoint bay facings, repair facilities and docking collars",
            category=CheckCategory.FACILITIES,
        ),
        checks.check_bays,
    ),
    LegalityCheck(
        CheckDefinition(
            check_id="tech/legality",
            name="Tech Legality",
            description="Equipment and armor are legal in the tech context",
            category=CheckCategory.TECH,
        ),
        checks.check_tech_legality,
    ),
)


def get_check(check_id: str) -> Optional[LegalityCheck]:
    """Get a default check by id."""
    for check in DEFAULT_CHECKS:
        if check.check_id == check_id:
            return check
    return None


def get_checks_by_category(category: CheckCategory) -> List[LegalityCheck]:
    return [check for check in DEFAULT_CHECKS if check.definition.category is category]


def list_check_ids() -> List[str]:
    return [check.check_id for check in DEFAULT_CHECKS]
