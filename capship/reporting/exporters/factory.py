"""
reporting/exporters/factory.py - Exporter factory.
"""

from __future__ import annotations
from typing import Dict, Type

from .base import BaseExporter
from .text import TextExporter
from .markdown import MarkdownExporter
from .json_exporter import JSONExporter
from ..enums import ExportFormat


# Registry of exporters by format
_EXPORTER_REGISTRY: Dict[ExportFormat, Type[BaseExporter]] = {
    ExportFormat.TEXT: TextExporter,
    ExportFormat.MARKDOWN: MarkdownExporter,
    ExportFormat.JSON: JSONExporter,
}


def get_exporter(format: ExportFormat, **kwargs) -> BaseExporter:
    """
    Get exporter instance for format.

    Args:
        format: Export format
        **kwargs: Exporter-specific options

    Raises:
        ValueError: Unknown export format
    """
    if format not in _EXPORTER_REGISTRY:
        raise ValueError(f"Unknown export format: {format}")
    return _EXPORTER_REGISTRY[format](**kwargs)
