"""Rendering and export of search and diagnosis results."""

from tracklayout.analysis.export import export_diagnosis_json, export_layouts_json
from tracklayout.analysis.report import format_diagnosis, format_layout, format_path

__all__ = [
    "export_diagnosis_json",
    "export_layouts_json",
    "format_diagnosis",
    "format_layout",
    "format_path",
]
