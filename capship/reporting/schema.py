"""
reporting/schema.py - Report data structures.

Reports are presentational only: they hold already computed values in
display order and carry no rules of their own.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .enums import ReportType, SectionType


@dataclass
class ReportMetadata:
    """Report metadata."""
    title: str
    report_type: ReportType
    design_name: str
    hull_class: str
    tonnage: float

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_by: str = "capship"
    version: str = "1.0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "report_type": self.report_type.value,
            "design_name": self.design_name,
            "hull_class": self.hull_class,
            "tonnage": self.tonnage,
            "created_at": self.created_at.isoformat(),
            "created_by": self.created_by,
            "version": self.version,
        }


@dataclass
class ReportTable:
    """Report table."""
    table_id: str
    title: str

    headers: List[str] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)

    def add_row(self, *values) -> None:
        """Add a row to the table."""
        self.rows.append(list(values))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_id": self.table_id,
            "title": self.title,
            "headers": self.headers,
            "rows": self.rows,
        }


@dataclass
class ReportSection:
    """Report section."""
    section_id: str
    section_type: SectionType
    title: str

    paragraphs: List[str] = field(default_factory=list)
    tables: List[ReportTable] = field(default_factory=list)

    def add_paragraph(self, text: str) -> None:
        self.paragraphs.append(text)

    def add_table(self, table: ReportTable) -> None:
        self.tables.append(table)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section_id": self.section_id,
            "section_type": self.section_type.value,
            "title": self.title,
            "paragraphs": self.paragraphs,
            "tables": [t.to_dict() for t in self.tables],
        }


@dataclass
class Report:
    """Complete report."""
    metadata: ReportMetadata
    sections: List[ReportSection] = field(default_factory=list)

    executive_summary: str = ""
    data: Dict[str, Any] = field(default_factory=dict)

    def add_section(self, section: ReportSection) -> None:
        self.sections.append(section)

    def get_section(self, section_type: SectionType) -> Optional[ReportSection]:
        """Get section by type."""
        for section in self.sections:
            if section.section_type == section_type:
                return section
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "executive_summary": self.executive_summary,
            "sections": [s.to_dict() for s in self.sections],
            "data": self.data,
        }
