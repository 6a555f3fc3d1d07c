"""
capship Validator Taxonomy

Defines check categories, check metadata and the result types produced by
the legality battery.

Rule violations are data: every check returns a ``CheckResult`` and the
validator combines them into a ``ValidationResult``. Only structural errors
(see ``capship.errors``) are raised.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from capship.catalog import ReferenceCatalog, TechContext, TechOracle
    from capship.core.design import UnitDesign
    from capship.weight import AttributeSet


# =============================================================================
# ENUMS
# =============================================================================

class CheckCategory(Enum):
    """High-level grouping of legality checks."""
    HULL = "hull"
    WEIGHT = "weight"
    HEAT = "heat"
    ARMOR = "armor"
    EQUIPMENT = "equipment"
    CREW = "crew"
    FACILITIES = "facilities"
    TECH = "tech"


# =============================================================================
# CHECK INPUT
# =============================================================================

@dataclass(frozen=True)
class CheckContext:
    """
    Read-only inputs shared by every check in one validation pass.
    """
    design: "UnitDesign"
    attributes: "AttributeSet"
    catalog: "ReferenceCatalog"
    oracle: "TechOracle"
    tech_context: "TechContext"
    allow_overweight_construction: bool = False


# Check body: returns (passed, diagnostics)
CheckFunction = Callable[[CheckContext], Tuple[bool, List[str]]]


# =============================================================================
# CHECK DEFINITION
# =============================================================================

@dataclass(frozen=True)
class CheckDefinition:
    """
    Metadata for one legality check.

    Attributes:
        check_id: Stable identifier, e.g. "equipment/combinations"
        name: Human-readable name
        description: What the check enforces
        category: Check grouping
    """
    check_id: str
    name: str
    description: str
    category: CheckCategory

    def to_dict(self) -> Dict[str, Any]:
        return {
            "check_id": self.check_id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
        }


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check."""
    check_id: str
    name: str
    passed: bool
    diagnostics: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "check_id": self.check_id,
            "name": self.name,
            "passed": self.passed,
            "diagnostics": list(self.diagnostics),
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    Verdict of a full validation pass.

    ``legal`` is the AND of all check results unless ``overridden`` is set,
    in which case the design was accepted as a canonical exception and the
    diagnostics are kept unchanged.
    """
    legal: bool
    diagnostics: Tuple[str, ...] = ()
    check_results: Tuple[CheckResult, ...] = ()
    overridden: bool = False

    @property
    def failed_checks(self) -> List[CheckResult]:
        return [result for result in self.check_results if not result.passed]

    def get_check(self, check_id: str) -> Optional[CheckResult]:
        for result in self.check_results:
            if result.check_id == check_id:
                return result
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "legal": self.legal,
            "overridden": self.overridden,
            "diagnostics": list(self.diagnostics),
            "checks": [result.to_dict() for result in self.check_results],
        }


@dataclass(frozen=True)
class LegalityCheck:
    """A check definition bound to its implementation."""
    definition: CheckDefinition
    function: CheckFunction = field(compare=False)

    @property
    def check_id(self) -> str:
        return self.definition.check_id

    def run(self, context: CheckContext) -> CheckResult:
        passed, diagnostics = self.function(context)
        return CheckResult(
            check_id=self.definition.check_id,
            name=self.definition.name,
            passed=passed,
            diagnostics=tuple(diagnostics),
        )
