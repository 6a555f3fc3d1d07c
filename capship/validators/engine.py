"""
capship Design Validator

Runs the full legality battery on a design. Every check runs regardless of
earlier failures; the verdict is the AND of all results, except that a
design flagged as a canonical unit with an invalid build is accepted with
its diagnostics intact.

Structural errors (unknown equipment, missing armor, bad hull class)
propagate to the caller unchanged.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
import logging

from capship.bootstrap.config import ValidationConfig
from capship.catalog import (
    PermissiveTechOracle,
    ReferenceCatalog,
    TechContext,
    TechOracle,
)
from capship.core.design import UnitDesign
from capship.weight import AttributeCalculator, AttributeSet
from .registry import DEFAULT_CHECKS
from .taxonomy import CheckContext, CheckResult, LegalityCheck, ValidationResult

logger = logging.getLogger(__name__)


class DesignValidator:
    """
    Legality validator for advanced aerospace designs.

    Args:
        catalog: Reference catalog for equipment and armor lookups
        oracle: Tech legality oracle (permissive if omitted)
        tech_context: Ruleset context; defaults to the design's own year
            and tech base
        config: Validation options
        checks: Check battery to run (defaults to the full ordered battery)
    """

    def __init__(
        self,
        catalog: ReferenceCatalog,
        oracle: Optional[TechOracle] = None,
        tech_context: Optional[TechContext] = None,
        config: Optional[ValidationConfig] = None,
        checks: Optional[Sequence[LegalityCheck]] = None,
    ):
        self.catalog = catalog
        self.oracle = oracle or PermissiveTechOracle()
        self.tech_context = tech_context
        self.config = config or ValidationConfig()
        self.checks = tuple(checks) if checks is not None else DEFAULT_CHECKS
        self.calculator = AttributeCalculator(catalog)

    def context_for(self, design: UnitDesign) -> TechContext:
        if self.tech_context is not None:
            return self.tech_context
        return TechContext(
            year=design.original_year,
            tech_base=design.tech_base,
            allow_unofficial=self.config.allow_unofficial,
        )

    def validate(
        self,
        design: UnitDesign,
        attributes: Optional[AttributeSet] = None,
    ) -> ValidationResult:
        """
        Validate a design.

        Args:
            design: Design to check
            attributes: Precomputed attributes; calculated if omitted

        Returns:
            ValidationResult with verdict, ordered diagnostics and per-check results

        Raises:
            StructuralError: the design references data that cannot be resolved
        """
        if attributes is None:
            attributes = self.calculator.calculate(design)

        context = CheckContext(
            design=design,
            attributes=attributes,
            catalog=self.catalog,
            oracle=self.oracle,
            tech_context=self.context_for(design),
            allow_overweight_construction=self.config.allow_overweight_construction,
        )

        results: List[CheckResult] = []
        for check in self.checks:
            result = check.run(context)
            if not result.passed:
                logger.debug(f"{design.display_name}: {result.name} failed")
            results.append(result)

        diagnostics = tuple(line for result in results for line in result.diagnostics)
        legal = all(result.passed for result in results)
        overridden = False

        if not legal and design.canon_invalid_build:
            logger.warning(
                f"{design.display_name}: accepted as canonical despite "
                f"{len(diagnostics)} diagnostic(s)"
            )
            legal = True
            overridden = True

        logger.info(f"{design.display_name}: {'legal' if legal else 'illegal'}")

        return ValidationResult(
            legal=legal,
            diagnostics=diagnostics,
            check_results=tuple(results),
            overridden=overridden,
        )
