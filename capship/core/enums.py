"""
capship Core Enumerations

Closed vocabularies shared by the design model, the calculator and the
validator: hull classes, drive cores, firing arcs, bay types, heat sinks and
equipment flags.
"""

from enum import Enum


class HullClass(Enum):
    """Advanced aerospace hull categories."""
    JUMPSHIP = "jumpship"
    WARSHIP = "warship"
    SPACE_STATION = "space_station"


class DriveCoreType(Enum):
    """Kearny-Fuchida drive core variants."""
    STANDARD = "standard"
    COMPACT = "compact"
    SUBCOMPACT = "subcompact"
    PRIMITIVE = "primitive"
    NONE = "none"


class HeatSinkType(Enum):
    """Heat sink technology."""
    SINGLE = "single"
    DOUBLE = "double"


class TechBase(Enum):
    """Technology base of a design or equipment record."""
    INNER_SPHERE = "inner_sphere"
    CLAN = "clan"
    ALL = "all"


class Arc(Enum):
    """
    Firing arcs / locations.

    Values follow the conventional location index. The first six arcs are
    also the armor facings; broadsides exist on warships only.
    """
    NOSE = 0
    FRONT_LEFT = 1
    FRONT_RIGHT = 2
    AFT = 3
    AFT_LEFT = 4
    AFT_RIGHT = 5
    LEFT_BROADSIDE = 6
    RIGHT_BROADSIDE = 7

    @property
    def is_armor_facing(self) -> bool:
        return self.value < Arc.LEFT_BROADSIDE.value

    @property
    def abbreviation(self) -> str:
        return ARC_ABBREVIATIONS[self]


ARC_ABBREVIATIONS = {
    Arc.NOSE: "N",
    Arc.FRONT_LEFT: "FLS",
    Arc.FRONT_RIGHT: "FRS",
    Arc.AFT: "A",
    Arc.AFT_LEFT: "ALS",
    Arc.AFT_RIGHT: "ARS",
    Arc.LEFT_BROADSIDE: "LBS",
    Arc.RIGHT_BROADSIDE: "RBS",
}

ARMOR_FACINGS = tuple(arc for arc in Arc if arc.is_armor_facing)

# Left/right arc pairs whose weapon loads must mirror each other
LATERAL_ARC_PAIRS = (
    ("forward", Arc.FRONT_LEFT, Arc.FRONT_RIGHT),
    ("aft", Arc.AFT_LEFT, Arc.AFT_RIGHT),
    ("broadside", Arc.LEFT_BROADSIDE, Arc.RIGHT_BROADSIDE),
)


class EquipmentKind(Enum):
    """Top-level equipment record kind."""
    WEAPON = "weapon"
    AMMO = "ammo"
    MISC = "misc"


class EquipmentFlag(Enum):
    """Flags queried by the calculator and the checks."""
    # Hull-class equipment categories
    JS_EQUIPMENT = "js_equipment"
    WS_EQUIPMENT = "ws_equipment"
    SS_EQUIPMENT = "ss_equipment"

    # Weapon markers
    AERO_WEAPON = "aero_weapon"
    CAPITAL = "capital"
    SCREEN_LAUNCHER = "screen_launcher"
    MASS_DRIVER = "mass_driver"
    ONE_SHOT = "one_shot"

    # Misc markers
    NAVAL_C3 = "naval_c3"
    USES_WEAPON_SLOT = "uses_weapon_slot"

    # Armor markers
    PRIMITIVE_ARMOR = "primitive_armor"
    UNOFFICIAL = "unofficial"


class BayType(Enum):
    """Transport and weapon bay types."""
    WEAPON = "weapon"
    CARGO = "cargo"
    LIQUID_CARGO = "liquid_cargo"
    REFRIGERATED_CARGO = "refrigerated_cargo"
    INSULATED_CARGO = "insulated_cargo"
    LIVESTOCK_CARGO = "livestock_cargo"
    INFANTRY = "infantry"
    BATTLE_ARMOR = "battle_armor"
    MECH = "mech"
    VEHICLE = "vehicle"
    FIGHTER = "fighter"
    SMALL_CRAFT = "small_craft"
    DROP_SHUTTLE = "drop_shuttle"
    REPAIR_PRESSURIZED = "repair_pressurized"
    REPAIR_UNPRESSURIZED = "repair_unpressurized"
    QUARTERS_OFFICER = "quarters_officer"
    QUARTERS_STANDARD = "quarters_standard"
    QUARTERS_SECOND_CLASS = "quarters_second_class"
    QUARTERS_STEERAGE = "quarters_steerage"
    QUARTERS_FIRST_CLASS = "quarters_first_class"

    @property
    def is_cargo(self) -> bool:
        return self in CARGO_BAYS

    @property
    def is_infantry(self) -> bool:
        return self in (BayType.INFANTRY, BayType.BATTLE_ARMOR)

    @property
    def is_quarters(self) -> bool:
        return self in QUARTERS_BAYS

    @property
    def is_repair_facility(self) -> bool:
        return self in (BayType.REPAIR_PRESSURIZED, BayType.REPAIR_UNPRESSURIZED)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def hardpoint_cost(self) -> int:
        """Docking hardpoints consumed by the bay."""
        if self is BayType.DROP_SHUTTLE or self.is_repair_facility:
            return 2
        return 0


CARGO_BAYS = frozenset({
    BayType.CARGO,
    BayType.LIQUID_CARGO,
    BayType.REFRIGERATED_CARGO,
    BayType.INSULATED_CARGO,
    BayType.LIVESTOCK_CARGO,
})

QUARTERS_BAYS = frozenset({
    BayType.QUARTERS_OFFICER,
    BayType.QUARTERS_STANDARD,
    BayType.QUARTERS_SECOND_CLASS,
    BayType.QUARTERS_STEERAGE,
    BayType.QUARTERS_FIRST_CLASS,
})


class Granularity(Enum):
    """Tonnage rounding granularity."""
    TON = 1.0
    HALF_TON = 0.5


class RoundingMode(Enum):
    """Rounding direction."""
    NEAREST = "nearest"
    CEILING = "ceiling"
    FLOOR = "floor"
