"""
reporting/exporters/markdown.py - Markdown exporter.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .base import BaseExporter
from ..enums import ExportFormat

if TYPE_CHECKING:
    from ..schema import Report, ReportSection, ReportTable


class MarkdownExporter(BaseExporter):
    """Exports reports to Markdown format."""

    format = ExportFormat.MARKDOWN

    def export(self, report: "Report") -> str:
        """Export report to Markdown string."""
        lines = []

        lines.append(f"# {report.metadata.title}")
        lines.append("")
        lines.append(f"**Verdict:** {report.executive_summary}")
        lines.append(f"**Generated:** {report.metadata.created_at.isoformat()}")
        lines.append("")

        for section in report.sections:
            lines.extend(self._export_section(section))

        return "\n".join(lines)

    def _export_section(self, section: "ReportSection") -> list:
        lines = [f"## {section.title}", ""]

        if section.paragraphs:
            for para in section.paragraphs:
                lines.append(f"- {para}".replace("\n", "  \n  "))
            lines.append("")

        for table in section.tables:
            lines.extend(self._export_table(table))

        return lines

    def _export_table(self, table: "ReportTable") -> list:
        """Export a table to Markdown format."""
        lines = []

        if table.title:
            lines.append(f"**{table.title}**")
            lines.append("")

        if not table.headers:
            return lines

        lines.append("| " + " | ".join(str(h) for h in table.headers) + " |")
        lines.append("| " + " | ".join("---" for _ in table.headers) + " |")
        for row in table.rows:
            lines.append("| " + " | ".join(self.format_cell(cell) for cell in row) + " |")
        lines.append("")

        return lines
