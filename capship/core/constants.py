"""
capship Construction Constants

Fixed numbers from the capital-ship construction rules. Era-dependent
multipliers are kept as ordered threshold tables rather than branches so a
new era is a new row.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Generic, Tuple, TypeVar

from .enums import DriveCoreType

T = TypeVar("T")


@dataclass(frozen=True)
class YearTierTable(Generic[T]):
    """
    Ordered year threshold table.

    ``tiers`` lists ``(first_year, value)`` pairs from the newest era down;
    the first tier whose year is not after ``year`` wins, otherwise
    ``default`` (the oldest era) applies.
    """
    tiers: Tuple[Tuple[int, T], ...]
    default: T

    def lookup(self, year: int) -> T:
        for first_year, value in self.tiers:
            if year >= first_year:
                return value
        return self.default


# ==================== Era Tables ====================

# Primitive engine mass multiplier (x tonnage x original thrust)
PRIMITIVE_ENGINE_MULTIPLIER: YearTierTable[float] = YearTierTable(
    tiers=((2300, 0.06), (2251, 0.066), (2201, 0.084), (2151, 0.102)),
    default=0.12,
)

# Primitive control system multiplier (x tonnage)
PRIMITIVE_CONTROL_MULTIPLIER: YearTierTable[float] = YearTierTable(
    tiers=((2300, 0.0025), (2251, 0.00275), (2201, 0.0035), (2151, 0.005)),
    default=0.00625,
)

# Primitive jump sail (divisor, flat tons)
PRIMITIVE_SAIL_FORMULA: YearTierTable[Tuple[int, int]] = YearTierTable(
    tiers=((2300, (20000, 30)), (2260, (8000, 75)), (2230, (4000, 150))),
    default=(2000, 300),
)


# ==================== Drive ====================

STANDARD_ENGINE_MULTIPLIER = 0.06
STATION_KEEPING_MULTIPLIER = 0.012
LF_BATTERY_FRACTION = 0.01


@dataclass(frozen=True)
class DriveCoreProfile:
    """Tonnage limits and K-F drive mass fraction for a drive core."""
    min_tonnage: int
    weight_increment: int
    drive_fraction: float


DRIVE_CORE_PROFILES: Dict[DriveCoreType, DriveCoreProfile] = {
    DriveCoreType.STANDARD: DriveCoreProfile(50000, 1000, 0.95),
    DriveCoreType.COMPACT: DriveCoreProfile(100000, 10000, 0.4525),
    DriveCoreType.SUBCOMPACT: DriveCoreProfile(5000, 100, 0.45),
    DriveCoreType.PRIMITIVE: DriveCoreProfile(50000, 1000, 0.95),
    DriveCoreType.NONE: DriveCoreProfile(2000, 500, 0.0),
}


# ==================== Heat Sinks ====================

FREE_HEAT_SINK_BASE = 45
HEAT_SINK_WEIGHT = 1.0


# ==================== Armor ====================

ARMOR_FACING_COUNT = 6
FREE_ARMOR_SI_DIVISOR = 10.0
PRIMITIVE_ARMOR_FACTOR = 0.66


# ==================== Fuel ====================

FUEL_PUMP_FRACTION = 0.02


# ==================== Fire Control ====================

MASS_DRIVER_SLOTS = 10
FIRE_CONTROL_DIVISOR = 10.0
NAVAL_C3_FIRE_CONTROL_FACTOR = 2


# ==================== Crew ====================

STANDARD_WEAPONS_PER_GUNNER = 6
CREW_PER_OFFICER = 6


# ==================== Gravity Decks ====================

GRAV_DECK_STANDARD_MAX = 100
GRAV_DECK_LARGE_MAX = 250
GRAV_DECK_HUGE_MAX = 1500

GRAV_DECK_STANDARD_WEIGHT = 50
GRAV_DECK_LARGE_WEIGHT = 100
GRAV_DECK_HUGE_WEIGHT = 500

GRAV_DECK_BASE_COUNT = 3
GRAV_DECK_TONNAGE_STEP = 100000


# ==================== Small Craft, Collars, Bays ====================

# Vehicle plus launch mechanism
LIFE_BOAT_WEIGHT = 7
DOCKING_COLLAR_WEIGHT = 1000
DOCKING_COLLAR_MIN_TONNAGE = 50000
DOCKING_COLLAR_TONNAGE_STEP = 50000

BAY_DOOR_BASE = 8
BAY_DOOR_TONNAGE_STEP = 100000


# ==================== Ammunition ====================

AMMO_FAMILY_NONE = "na"

MIN_SHOTS_PER_WEAPON = 10

# Extra shot multipliers for rapid-fire families
AMMO_SHOT_MULTIPLIERS: Dict[str, int] = {
    "ac_ultra": 2,
    "ac_ultra_thb": 2,
    "ac_rotary": 6,
}

# Mass driver ammo family -> minimum hull tonnage
MASS_DRIVER_MIN_TONNAGE: Dict[str, int] = {
    "hmass": 2000000,
    "mmass": 1500000,
    "lmass": 750000,
}

