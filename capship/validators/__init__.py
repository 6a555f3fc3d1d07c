"""
validators/ - Legality Battery

Independent legality checks, their ordered registry and the validator that
combines them into a verdict.
"""

from .taxonomy import (
    CheckCategory,
    CheckContext,
    CheckDefinition,
    CheckResult,
    LegalityCheck,
    ValidationResult,
)
from .registry import (
    DEFAULT_CHECKS,
    get_check,
    get_checks_by_category,
    list_check_ids,
)
from .engine import DesignValidator

__all__ = [
    # Taxonomy
    "CheckCategory",
    "CheckContext",
    "CheckDefinition",
    "CheckResult",
    "LegalityCheck",
    "ValidationResult",
    # Registry
    "DEFAULT_CHECKS",
    "get_check",
    "get_checks_by_category",
    "list_check_ids",
    # Engine
    "DesignValidator",
]
