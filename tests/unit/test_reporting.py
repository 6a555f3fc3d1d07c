"""
Unit tests for report generation and export.
"""

import json
from dataclasses import replace

import pytest

from capship.reporting import (
    ExportFormat,
    JSONExporter,
    MarkdownExporter,
    ReportType,
    SectionType,
    TextExporter,
    ValidationReportGenerator,
    get_exporter,
    verdict_text,
)
from capship.validators import DesignValidator


@pytest.fixture
def report_inputs(catalog, calculator, warship):
    attributes = calculator.calculate(warship)
    result = DesignValidator(catalog).validate(warship, attributes)
    return warship, attributes, result


@pytest.fixture
def report(report_inputs):
    return ValidationReportGenerator().generate(*report_inputs)


@pytest.fixture
def failing_report(catalog, calculator, warship):
    design = replace(warship, heat_sinks=400)
    attributes = calculator.calculate(design)
    result = DesignValidator(catalog).validate(design, attributes)
    return ValidationReportGenerator().generate(design, attributes, result)


class TestReportGenerator:
    """Tests for ValidationReportGenerator."""

    def test_metadata(self, report):
        assert report.metadata.report_type is ReportType.VALIDATION
        assert report.metadata.title == "Warship: Aegis Heavy Cruiser"
        assert report.metadata.hull_class == "warship"
        assert report.executive_summary == "Legal"

    def test_section_order(self, report):
        assert [s.section_type for s in report.sections] == [
            SectionType.SUMMARY,
            SectionType.BUDGETS,
            SectionType.WEIGHT_LEDGER,
            SectionType.FIRE_CONTROL,
            SectionType.DIAGNOSTICS,
        ]
        assert [s.section_id for s in report.sections][-1] == "SEC-005"

    def test_weight_ledger(self, report, report_inputs):
        _, attributes, _ = report_inputs
        table = report.get_section(SectionType.WEIGHT_LEDGER).tables[0]
        labels = [row[0] for row in table.rows]
        assert labels[:3] == ["Structure", "Engine", "K/F Drive Core"]
        assert labels[-2:] == ["Total", "Tonnage"]
        assert table.rows[-2][1] == attributes.total_weight

    def test_fire_control_rows(self, report):
        table = report.get_section(SectionType.FIRE_CONTROL).tables[0]
        assert [row[0] for row in table.rows] == ["N", "FLS", "FRS", "A", "ALS", "ARS", "LBS", "RBS"]

    def test_clean_diagnostics(self, report):
        section = report.get_section(SectionType.DIAGNOSTICS)
        assert section.paragraphs == ["No problems found."]
        assert all(row[1] == "pass" for row in section.tables[0].rows)

    def test_failing_diagnostics(self, failing_report):
        section = failing_report.get_section(SectionType.DIAGNOSTICS)
        assert section.paragraphs == ["Heat Sinks:\n Total     400\n Required  469"]
        assert ["Heat Sinks", "FAIL"] in section.tables[0].rows
        assert failing_report.executive_summary == "Illegal"

    def test_data_payload(self, report):
        assert report.data["validation"]["legal"] is True
        assert report.data["attributes"]["total_weight"] == 394903.0

    def test_ids_restart_per_report(self, report_inputs):
        generator = ValidationReportGenerator()
        generator.generate(*report_inputs)
        second = generator.generate(*report_inputs)
        assert second.sections[0].section_id == "SEC-001"
        assert second.sections[1].tables[0].table_id == "TBL-001"


class TestVerdictText:
    """Tests for verdict_text."""

    def test_override(self, catalog, warship):
        design = replace(warship, heat_sinks=0, canon_invalid_build=True)
        result = DesignValidator(catalog).validate(design)
        assert verdict_text(result).startswith("Legal (accepted as canonical")


class TestExporters:
    """Tests for the text, Markdown and JSON exporters."""

    def test_factory(self):
        assert isinstance(get_exporter(ExportFormat.TEXT), TextExporter)
        assert isinstance(get_exporter(ExportFormat.MARKDOWN), MarkdownExporter)
        assert isinstance(get_exporter(ExportFormat.JSON, indent=4), JSONExporter)

    def test_factory_unknown(self):
        with pytest.raises(ValueError):
            get_exporter("pdf")

    def test_text_ledger(self, report):
        text = TextExporter(print_size=40).export(report)
        lines = text.splitlines()
        assert lines[0] == "Warship: Aegis Heavy Cruiser"
        structure = next(line for line in lines if line.strip().startswith("Structure:"))
        assert structure.endswith("50,000.0")
        assert "Total:" in text
        assert "No problems found." in text

    def test_text_print_size(self, report):
        narrow = TextExporter(print_size=20).export(report)
        wide = TextExporter(print_size=60).export(report)
        assert len(max(wide.splitlines(), key=len)) > len(max(narrow.splitlines(), key=len))

    def test_text_multiline_diagnostics_indented(self, failing_report):
        text = TextExporter().export(failing_report)
        assert "\n   Total     400\n" in text

    def test_markdown(self, report):
        md = MarkdownExporter().export(report)
        assert md.startswith("# Warship: Aegis Heavy Cruiser")
        assert "## Weight" in md
        assert "| Component | Tons |" in md
        assert "| Structure | 50,000.0 |" in md

    def test_json(self, report):
        data = json.loads(JSONExporter().export(report))
        assert data["metadata"]["design_name"] == "Aegis Heavy Cruiser"
        assert data["sections"][0]["section_type"] == "summary"
        assert data["data"]["validation"]["overridden"] is False

    def test_export_to_file(self, report, tmp_path):
        path = tmp_path / "report.md"
        MarkdownExporter().export_to_file(report, str(path))
        assert path.read_text(encoding="utf-8").startswith("# Warship")
