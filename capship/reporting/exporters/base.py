"""
reporting/exporters/base.py - Base exporter class.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..schema import Report
from ..enums import ExportFormat


class BaseExporter(ABC):
    """Abstract base class for report exporters."""

    format: ExportFormat

    @abstractmethod
    def export(self, report: Report) -> str:
        """
        Export report to string format.

        Args:
            report: Report to export

        Returns:
            String representation in target format
        """

    def export_to_file(self, report: Report, file_path: str) -> None:
        content = self.export(report)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)

    @staticmethod
    def format_cell(value: Any) -> str:
        """Tonnages to one decimal, everything else as is."""
        if isinstance(value, float):
            return f"{value:,.1f}"
        return str(value)
