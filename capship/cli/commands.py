"""
cli/commands.py - CLI command implementations
"""

from __future__ import annotations
from dataclasses import replace
import argparse
import json

from .core import (
    CLICommand,
    CLIContext,
    CommandResult,
    EXIT_ILLEGAL,
    EXIT_LEGAL,
    EXIT_STRUCTURAL,
)
from capship.catalog import IntroYearTechOracle, TechContext
from capship.core.enums import TechBase
from capship.errors import StructuralError
from capship.reporting import ExportFormat, ValidationReportGenerator, get_exporter
from capship.weight import AttributeCalculator
from capship.validators import DesignValidator


def _add_catalog_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("design", help="Path to design JSON file")
    parser.add_argument(
        "--catalog", "-c", help="Path to reference catalog JSON (default: CAPSHIP_CATALOG)"
    )


def _structural_failure(error: StructuralError) -> CommandResult:
    return CommandResult(
        success=False,
        error=f"{type(error).__name__}: {error.message}",
        data=error.to_dict(),
        exit_code=EXIT_STRUCTURAL,
    )


class ValidateCommand(CLICommand):
    """Validate a design and print its report."""

    name = "validate"
    description = "Validate a design and print the construction report"
    aliases = ["check"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_catalog_argument(parser)
        parser.add_argument(
            "--format", "-f",
            choices=[f.value for f in ExportFormat],
            default=ExportFormat.TEXT.value,
            help="Report format",
        )
        parser.add_argument(
            "--year",
            type=int,
            nargs="?",
            const=-1,
            default=None,
            help="Check tech legality in this year (configured default year if no value)",
        )
        parser.add_argument(
            "--allow-overweight",
            action="store_true",
            help="Skip the weight budget check",
        )

    def _tech_context(self, ctx: CLIContext, args: argparse.Namespace):
        if args.year is None:
            return None
        settings = ctx.config.validation
        year = settings.default_year if args.year < 0 else args.year
        return TechContext(
            year=year,
            tech_base=TechBase(settings.tech_base),
            allow_unofficial=settings.allow_unofficial,
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        settings = ctx.config.validation
        if args.allow_overweight:
            settings = replace(settings, allow_overweight_construction=True)

        try:
            catalog = ctx.load_catalog(args.catalog)
            design = ctx.load_design(args.design)
            validator = DesignValidator(
                catalog,
                oracle=IntroYearTechOracle(),
                tech_context=self._tech_context(ctx, args),
                config=settings,
            )
            attributes = validator.calculator.calculate(design)
            result = validator.validate(design, attributes)
        except StructuralError as e:
            return _structural_failure(e)

        report = ValidationReportGenerator().generate(design, attributes, result)
        export_format = ExportFormat(args.format)
        if export_format is ExportFormat.TEXT:
            exporter = get_exporter(export_format, print_size=settings.print_size)
        else:
            exporter = get_exporter(export_format)

        return CommandResult(
            success=True,
            message=exporter.export(report),
            data=result.to_dict(),
            exit_code=EXIT_LEGAL if result.legal else EXIT_ILLEGAL,
        )


class AttributesCommand(CLICommand):
    """Print a design's derived attributes."""

    name = "attributes"
    description = "Print the derived attribute set as JSON"
    aliases = ["attrs"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        _add_catalog_argument(parser)

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            catalog = ctx.load_catalog(args.catalog)
            design = ctx.load_design(args.design)
            attributes = AttributeCalculator(catalog).calculate(design)
        except StructuralError as e:
            return _structural_failure(e)

        data = attributes.to_dict()
        return CommandResult(
            success=True,
            message=json.dumps(data, indent=2),
            data=data,
        )
