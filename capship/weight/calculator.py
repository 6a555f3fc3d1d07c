"""
capship Attribute Calculator

Runs every formula in ``capship.weight.formulas`` once for a design and
freezes the results in an ``AttributeSet``. The calculator holds only the
read-only catalog, so one instance may serve many designs.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
import logging

from capship.core.design import UnitDesign
from capship.core.enums import Arc
from capship.catalog.catalog import ReferenceCatalog
from . import formulas

logger = logging.getLogger(__name__)


# Report order of the weight ledger: (label, AttributeSet field)
LEDGER_ORDER: Tuple[Tuple[str, str], ...] = (
    ("Structure", "structure_weight"),
    ("Engine", "engine_weight"),
    ("K/F Drive Core", "kf_drive_weight"),
    ("LF Battery", "lf_battery_weight"),
    ("Jump Sail", "sail_weight"),
    ("Control Systems", "control_weight"),
    ("Fuel", "fuel_weight"),
    ("Heat Sinks", "heat_sink_weight"),
    ("Armor", "armor_weight"),
    ("Extra Fire Control", "fire_control_weight"),
    ("Carrying Space", "carrying_space_weight"),
    ("Docking Hard Points", "hardpoint_weight"),
    ("Quarters", "quarters_weight"),
    ("Gravity Decks", "grav_deck_weight"),
    ("Life Boats/Escape Pods", "life_boat_weight"),
    ("Misc Equipment", "misc_weight"),
    ("Weapons", "weapon_weight"),
    ("Ammunition", "ammo_weight"),
)


@dataclass(frozen=True)
class AttributeSet:
    """
    Derived weights and limits for one design.

    All weights in tons. Computed fresh per validation and never mutated.
    """
    # Weights
    structure_weight: float
    engine_weight: float
    kf_drive_weight: float
    lf_battery_weight: float
    sail_weight: float
    control_weight: float
    fuel_weight: float
    heat_sink_weight: float
    armor_weight: float
    fire_control_weight: float
    carrying_space_weight: float
    hardpoint_weight: float
    quarters_weight: float
    grav_deck_weight: float
    life_boat_weight: float
    misc_weight: float
    weapon_weight: float
    ammo_weight: float
    total_weight: float

    # Armor
    max_armor_weight: float
    max_armor_points: int
    armor_points_per_ton: float
    free_armor_points: int

    # Heat
    free_heat_sinks: int

    # Hull limits
    min_tonnage: int
    weight_increment: int
    max_docking_hardpoints: int
    max_grav_decks: int
    max_grav_deck_diameter: int
    max_bay_doors: int

    # Crew
    minimum_base_crew: int
    required_gunners: int
    required_crew: int
    required_officers: int
    quarters_capacity: int

    fire_control_by_arc: Dict[Arc, float] = field(default_factory=dict)

    @property
    def engine_tonnage(self) -> float:
        return self.engine_weight

    def weight_ledger(self) -> List[Tuple[str, float]]:
        """(label, tons) in report order, without the total."""
        return [(label, getattr(self, name)) for label, name in LEDGER_ORDER]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary with stable float precision."""
        data: Dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if name == "fire_control_by_arc":
                value = {arc.abbreviation: round(v, 6) for arc, v in value.items()}
            elif isinstance(value, float):
                value = round(value, 6)
            data[name] = value
        return data


class AttributeCalculator:
    """
    Computes the ``AttributeSet`` of a design.

    Usage:
        calculator = AttributeCalculator(catalog)
        attributes = calculator.calculate(design)
    """

    def __init__(self, catalog: ReferenceCatalog):
        self.catalog = catalog

    def calculate(self, design: UnitDesign) -> AttributeSet:
        """
        Derive every budget for ``design``.

        Raises:
            UnknownEquipmentError: a mount references an unknown equipment id
            MissingArmorTypeError: the armor type cannot be resolved
            InvalidHullClassError: the hull class has no profile
        """
        catalog = self.catalog

        weights = {
            "structure_weight": formulas.structure_weight(design),
            "engine_weight": formulas.engine_tonnage(design),
            "kf_drive_weight": formulas.kf_drive_weight(design),
            "lf_battery_weight": formulas.lf_battery_weight(design),
            "sail_weight": formulas.sail_weight(design),
            "control_weight": formulas.control_weight(design),
            "fuel_weight": formulas.fuel_weight(design),
            "heat_sink_weight": formulas.heat_sink_weight(design),
            "armor_weight": formulas.armor_weight(design),
            "fire_control_weight": formulas.fire_control_weight(design, catalog),
            "carrying_space_weight": formulas.carrying_space_weight(design),
            "hardpoint_weight": formulas.hardpoint_weight(design),
            "quarters_weight": formulas.quarters_weight(design),
            "grav_deck_weight": formulas.grav_deck_weight(design),
            "life_boat_weight": formulas.life_boat_weight(design),
            "misc_weight": formulas.misc_weight(design, catalog),
            "weapon_weight": formulas.weapon_weight(design, catalog),
            "ammo_weight": formulas.ammo_weight(design, catalog),
        }
        total = sum(weights.values())

        base_crew = formulas.minimum_base_crew(design, catalog)
        gunners = formulas.required_gunners(design, catalog)
        required_crew = base_crew + gunners

        attributes = AttributeSet(
            **weights,
            total_weight=total,
            max_armor_weight=formulas.max_armor_weight(design),
            max_armor_points=formulas.max_armor_points(design, catalog),
            armor_points_per_ton=formulas.armor_points_per_ton(design, catalog),
            free_armor_points=formulas.free_armor_points(design),
            free_heat_sinks=formulas.free_heat_sinks(design),
            min_tonnage=formulas.min_tonnage(design),
            weight_increment=formulas.weight_increment(design),
            max_docking_hardpoints=formulas.max_docking_hardpoints(design),
            max_grav_decks=formulas.max_grav_decks(design),
            max_grav_deck_diameter=formulas.max_grav_deck_diameter(design),
            max_bay_doors=formulas.max_bay_doors(design),
            minimum_base_crew=base_crew,
            required_gunners=gunners,
            required_crew=required_crew,
            required_officers=formulas.required_officers(required_crew),
            quarters_capacity=formulas.quarters_capacity(design),
            fire_control_by_arc=formulas.fire_control_by_arc(design, catalog),
        )

        logger.debug(
            f"{design.display_name}: total {total:.1f} t of {design.tonnage:.0f} t"
        )
        return attributes
