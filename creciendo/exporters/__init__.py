"""
Export functionality for Creciendo Sano.
"""

from .json_export import export_json, export_json_summary
from .markdown import export_markdown
from .text import export_text

__all__ = [
    "export_json",
    "export_json_summary",
    "export_markdown",
    "export_text",
]
