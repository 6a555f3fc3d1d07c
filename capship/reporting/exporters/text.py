"""
reporting/exporters/text.py - Plain text exporter.

Fixed-width weight ledger in the style of a construction worksheet.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List

from .base import BaseExporter
from ..enums import ExportFormat

if TYPE_CHECKING:
    from ..schema import Report, ReportSection, ReportTable


class TextExporter(BaseExporter):
    """Exports reports to plain text."""

    format = ExportFormat.TEXT

    def __init__(self, print_size: int = 40):
        """
        Args:
            print_size: Total width of a ledger line
        """
        self.print_size = print_size

    def export(self, report: "Report") -> str:
        lines = [report.metadata.title, "=" * len(report.metadata.title), ""]
        for section in report.sections:
            lines.extend(self._export_section(section))
        return "\n".join(lines).rstrip() + "\n"

    def _export_section(self, section: "ReportSection") -> List[str]:
        lines = [f"{section.title}:"]
        for paragraph in section.paragraphs:
            lines.extend(f"  {line}" for line in paragraph.splitlines())
        for table in section.tables:
            lines.extend(self._export_table(table))
        lines.append("")
        return lines

    def _export_table(self, table: "ReportTable") -> List[str]:
        label_width = max(self.print_size - 5, 1)
        value_width = 12
        lines = []
        if len(table.headers) > 2:
            header = table.headers[0].ljust(label_width)
            header += "".join(h.rjust(value_width) for h in table.headers[1:])
            lines.append(f"  {header.rstrip()}")
        for row in table.rows:
            label, values = row[0], row[1:]
            line = f"{label}:".ljust(label_width)
            line += "".join(self.format_cell(v).rjust(value_width) for v in values)
            lines.append(f"  {line}")
        return lines
