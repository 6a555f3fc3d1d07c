"""
errors/ - Structural Error Taxonomy

Exceptions for designs that reference unresolvable data. Rule violations
are reported through ``ValidationResult`` instead.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
    StructuralError,
    UnknownEquipmentError,
    MissingArmorTypeError,
    UnknownMountError,
    InvalidHullClassError,
    MalformedDesignError,
    CatalogLoadError,
    create_unknown_equipment_error,
    create_missing_armor_error,
    create_invalid_hull_error,
)

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "StructuralError",
    "UnknownEquipmentError",
    "MissingArmorTypeError",
    "UnknownMountError",
    "InvalidHullClassError",
    "MalformedDesignError",
    "CatalogLoadError",
    "create_unknown_equipment_error",
    "create_missing_armor_error",
    "create_invalid_hull_error",
]
