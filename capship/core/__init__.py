"""
capship Core

Shared vocabulary for the construction engine: enumerations, rule
constants, hull profiles, rounding primitives and the immutable design
model.
"""

from .enums import (
    HullClass,
    DriveCoreType,
    HeatSinkType,
    TechBase,
    Arc,
    ARMOR_FACINGS,
    LATERAL_ARC_PAIRS,
    EquipmentKind,
    EquipmentFlag,
    BayType,
    Granularity,
    RoundingMode,
)

from .constants import (
    YearTierTable,
    DriveCoreProfile,
    DRIVE_CORE_PROFILES,
    PRIMITIVE_ENGINE_MULTIPLIER,
    PRIMITIVE_CONTROL_MULTIPLIER,
    PRIMITIVE_SAIL_FORMULA,
)

from .hulls import HullProfile, HULL_PROFILES, get_hull_profile, hull_arcs

from .rounding import (
    round_weight,
    ceil_weight,
    floor_weight,
    ceil_int,
    floor_int,
    round_int,
)

from .design import (
    ArmorFacing,
    CrewComplement,
    EquipmentMount,
    Bay,
    UnitDesign,
)

__all__ = [
    # Enumerations
    "HullClass",
    "DriveCoreType",
    "HeatSinkType",
    "TechBase",
    "Arc",
    "ARMOR_FACINGS",
    "LATERAL_ARC_PAIRS",
    "EquipmentKind",
    "EquipmentFlag",
    "BayType",
    "Granularity",
    "RoundingMode",
    # Constants
    "YearTierTable",
    "DriveCoreProfile",
    "DRIVE_CORE_PROFILES",
    "PRIMITIVE_ENGINE_MULTIPLIER",
    "PRIMITIVE_CONTROL_MULTIPLIER",
    "PRIMITIVE_SAIL_FORMULA",
    # Hulls
    "HullProfile",
    "HULL_PROFILES",
    "get_hull_profile",
    "hull_arcs",
    # Rounding
    "round_weight",
    "ceil_weight",
    "floor_weight",
    "ceil_int",
    "floor_int",
    "round_int",
    # Design model
    "ArmorFacing",
    "CrewComplement",
    "EquipmentMount",
    "Bay",
    "UnitDesign",
]
