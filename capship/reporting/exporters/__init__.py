"""
reporting/exporters/ - Report exporters.
"""

from .base import BaseExporter
from .text import TextExporter
from .markdown import MarkdownExporter
from .json_exporter import JSONExporter
from .factory import get_exporter

__all__ = [
    "BaseExporter",
    "TextExporter",
    "MarkdownExporter",
    "JSONExporter",
    "get_exporter",
]
