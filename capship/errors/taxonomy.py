"""
errors/taxonomy.py - Structural error classification

Rule violations are ordinary output (diagnostics plus ``legal=False``) and
never appear here. The errors below signal a broken precondition: a design
that references data the engine cannot resolve. They are raised, not
reported, and the canonical-unit override never suppresses them.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCategory(Enum):
    """Error categories."""
    # Reference errors (1xxx)
    REFERENCE = "reference"

    # Design shape errors (2xxx)
    DESIGN = "design"

    # Catalog errors (3xxx)
    CATALOG = "catalog"


class ErrorCode(Enum):
    """Specific error codes."""

    # Reference (1xxx)
    REF_UNKNOWN_EQUIPMENT = 1001
    REF_UNKNOWN_ARMOR = 1002
    REF_UNKNOWN_MOUNT = 1003

    # Design (2xxx)
    DES_INVALID_HULL = 2001
    DES_MALFORMED = 2002

    # Catalog (3xxx)
    CAT_LOAD_FAILED = 3001


class StructuralError(Exception):
    """
    Base class for structural (non-rule) failures.

    Carries a code, the component that raised it and, where applicable,
    the design path that could not be resolved.
    """

    code: ErrorCode = ErrorCode.DES_MALFORMED
    category: ErrorCategory = ErrorCategory.DESIGN

    def __init__(
        self,
        message: str,
        source: str = "",
        path: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.source = source
        self.path = path
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "error": type(self).__name__,
            "message": self.message,
            "source": self.source,
            "path": self.path,
            "value": None if self.value is None else str(self.value),
        }


class UnknownEquipmentError(StructuralError):
    """A mount references an equipment id missing from the catalog."""
    code = ErrorCode.REF_UNKNOWN_EQUIPMENT
    category = ErrorCategory.REFERENCE


class MissingArmorTypeError(StructuralError):
    """The design's armor type has no catalog mapping."""
    code = ErrorCode.REF_UNKNOWN_ARMOR
    category = ErrorCategory.REFERENCE


class UnknownMountError(StructuralError):
    """A bay references a mount id the design does not contain."""
    code = ErrorCode.REF_UNKNOWN_MOUNT
    category = ErrorCategory.REFERENCE


class InvalidHullClassError(StructuralError):
    """Hull class value outside the closed set."""
    code = ErrorCode.DES_INVALID_HULL
    category = ErrorCategory.DESIGN


class MalformedDesignError(StructuralError):
    """Design data cannot be turned into a ``UnitDesign``."""
    code = ErrorCode.DES_MALFORMED
    category = ErrorCategory.DESIGN


class CatalogLoadError(StructuralError):
    """Reference catalog file missing or failing schema validation."""
    code = ErrorCode.CAT_LOAD_FAILED
    category = ErrorCategory.CATALOG


def create_unknown_equipment_error(
    equipment_id: str,
    source: str,
    path: str = None,
) -> UnknownEquipmentError:
    """Factory for unknown equipment references."""
    return UnknownEquipmentError(
        f"Unknown equipment id: {equipment_id}",
        source=source,
        path=path,
        value=equipment_id,
    )


def create_missing_armor_error(
    armor_id: str,
    source: str,
) -> MissingArmorTypeError:
    """Factory for unmapped armor types."""
    return MissingArmorTypeError(
        f"No armor type mapping for: {armor_id}",
        source=source,
        path="armor_type",
        value=armor_id,
    )


def create_invalid_hull_error(
    hull_class: Any,
    source: str,
) -> InvalidHullClassError:
    """Factory for hull class values outside the closed set."""
    return InvalidHullClassError(
        f"Invalid hull class: {hull_class!r}",
        source=source,
        path="hull_class",
        value=hull_class,
    )
