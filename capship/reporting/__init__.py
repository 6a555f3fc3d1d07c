"""
reporting/ - Validation reports

Report schema, the validation report generator and text, Markdown and JSON
exporters.
"""

from .enums import ReportType, ExportFormat, SectionType
from .schema import Report, ReportMetadata, ReportSection, ReportTable
from .generator import ValidationReportGenerator, verdict_text
from .exporters import (
    BaseExporter,
    TextExporter,
    MarkdownExporter,
    JSONExporter,
    get_exporter,
)

__all__ = [
    # Enums
    "ReportType",
    "ExportFormat",
    "SectionType",
    # Schema
    "Report",
    "ReportMetadata",
    "ReportSection",
    "ReportTable",
    # Generator
    "ValidationReportGenerator",
    "verdict_text",
    # Exporters
    "BaseExporter",
    "TextExporter",
    "MarkdownExporter",
    "JSONExporter",
    "get_exporter",
]
