"""
reporting/generator.py - Validation report generator.

Arranges a design's ``AttributeSet`` and ``ValidationResult`` into a
``Report``: summary, budgets, weight ledger, fire control by arc and
diagnostics, always in that order.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .enums import ReportType, SectionType
from .schema import Report, ReportMetadata, ReportSection, ReportTable

if TYPE_CHECKING:
    from capship.core.design import UnitDesign
    from capship.validators import ValidationResult
    from capship.weight import AttributeSet


def verdict_text(result: "ValidationResult") -> str:
    if result.overridden:
        return "Legal (accepted as canonical despite invalid build)"
    return "Legal" if result.legal else "Illegal"


class ValidationReportGenerator:
    """Builds validation reports."""

    report_type = ReportType.VALIDATION

    def __init__(self):
        self._section_counter = 0
        self._table_counter = 0

    def _next_section_id(self) -> str:
        self._section_counter += 1
        return f"SEC-{self._section_counter:03d}"

    def _next_table_id(self) -> str:
        self._table_counter += 1
        return f"TBL-{self._table_counter:03d}"

    def generate(
        self,
        design: "UnitDesign",
        attributes: "AttributeSet",
        result: "ValidationResult",
    ) -> Report:
        """Generate the report for one validation pass."""
        self._section_counter = 0
        self._table_counter = 0

        profile = design.hull_profile
        report = Report(
            metadata=ReportMetadata(
                title=f"{profile.label}: {design.display_name}",
                report_type=self.report_type,
                design_name=design.display_name,
                hull_class=design.hull_class.value,
                tonnage=design.tonnage,
            ),
            executive_summary=verdict_text(result),
            data={
                "attributes": attributes.to_dict(),
                "validation": result.to_dict(),
            },
        )

        report.add_section(self._summary_section(design, result))
        report.add_section(self._budget_section(design, attributes))
        report.add_section(self._ledger_section(design, attributes))
        report.add_section(self._fire_control_section(attributes))
        report.add_section(self._diagnostics_section(result))
        return report

    def _summary_section(self, design: "UnitDesign", result: "ValidationResult") -> ReportSection:
        section = ReportSection(
            section_id=self._next_section_id(),
            section_type=SectionType.SUMMARY,
            title="Summary",
        )
        primitive = " (primitive)" if design.primitive else ""
        section.add_paragraph(f"Hull: {design.hull_profile.label}{primitive}")
        section.add_paragraph(f"Tonnage: {design.tonnage:,.0f}")
        section.add_paragraph(f"Drive core: {design.drive_core.value}")
        section.add_paragraph(f"Year: {design.original_year}")
        section.add_paragraph(f"Verdict: {verdict_text(result)}")
        return section

    def _budget_section(self, design: "UnitDesign", attributes: "AttributeSet") -> ReportSection:
        section = ReportSection(
            section_id=self._next_section_id(),
            section_type=SectionType.BUDGETS,
            title="Limits and Requirements",
        )
        table = ReportTable(
            table_id=self._next_table_id(),
            title="Limits",
            headers=["Item", "Installed", "Limit"],
        )
        crew = design.crew
        table.add_row("Armor (tons)", design.armor_tonnage, attributes.max_armor_weight)
        table.add_row(
            "Armor (points)",
            sum(facing.points for facing in design.armor),
            attributes.max_armor_points,
        )
        table.add_row("Heat sinks (minimum)", design.heat_sinks, attributes.free_heat_sinks)
        table.add_row(
            "Crew (minimum)", crew.crew - design.bay_personnel, attributes.required_crew
        )
        table.add_row("Officers (minimum)", crew.officers, attributes.required_officers)
        table.add_row("Gunners (required)", crew.gunners, attributes.required_gunners)
        table.add_row(
            "Quarters",
            attributes.quarters_capacity,
            crew.crew - design.bay_personnel + crew.passengers + crew.marines + crew.battle_armor,
        )
        table.add_row(
            "Docking hard points", design.docking_collars, attributes.max_docking_hardpoints
        )
        table.add_row("Gravity decks", len(design.grav_decks), attributes.max_grav_decks)
        table.add_row(
            "Bay doors",
            sum(bay.doors for bay in design.transport_bays),
            attributes.max_bay_doors,
        )
        section.add_table(table)
        return section

    def _ledger_section(self, design: "UnitDesign", attributes: "AttributeSet") -> ReportSection:
        section = ReportSection(
            section_id=self._next_section_id(),
            section_type=SectionType.WEIGHT_LEDGER,
            title="Weight",
        )
        table = ReportTable(
            table_id=self._next_table_id(),
            title="Weight Ledger",
            headers=["Component", "Tons"],
        )
        for label, weight in attributes.weight_ledger():
            table.add_row(label, weight)
        table.add_row("Total", attributes.total_weight)
        table.add_row("Tonnage", design.tonnage)
        section.add_table(table)
        return section

    def _fire_control_section(self, attributes: "AttributeSet") -> ReportSection:
        section = ReportSection(
            section_id=self._next_section_id(),
            section_type=SectionType.FIRE_CONTROL,
            title="Extra Fire Control",
        )
        table = ReportTable(
            table_id=self._next_table_id(),
            title="Extra Fire Control by Arc",
            headers=["Arc", "Tons"],
        )
        for arc, weight in attributes.fire_control_by_arc.items():
            table.add_row(arc.abbreviation, weight)
        section.add_table(table)
        return section

    def _diagnostics_section(self, result: "ValidationResult") -> ReportSection:
        section = ReportSection(
            section_id=self._next_section_id(),
            section_type=SectionType.DIAGNOSTICS,
            title="Diagnostics",
        )
        if result.diagnostics:
            for line in result.diagnostics:
                section.add_paragraph(line)
        else:
            section.add_paragraph("No problems found.")

        table = ReportTable(
            table_id=self._next_table_id(),
            title="Checks",
            headers=["Check", "Result"],
        )
        for check in result.check_results:
            table.add_row(check.name, "pass" if check.passed else "FAIL")
        section.add_table(table)
        return section
