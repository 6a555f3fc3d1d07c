"""
reporting/enums.py - Reporting enumerations.
"""

from enum import Enum


class ReportType(Enum):
    """Report type identifiers."""
    VALIDATION = "validation"
    ATTRIBUTES = "attributes"


class ExportFormat(Enum):
    """Export format options."""
    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


class SectionType(Enum):
    """Report section types."""
    SUMMARY = "summary"
    WEIGHT_LEDGER = "weight_ledger"
    FIRE_CONTROL = "fire_control"
    BUDGETS = "budgets"
    DIAGNOSTICS = "diagnostics"
