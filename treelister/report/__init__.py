"""Report bodies (list and tree) and the timestamped report document."""

from __future__ import annotations

from .document import OUTPUT_FORMATS, Report, build_report, report_filename, write_report
from .listing import format_list_lines
from .tree import format_tree_lines, render_external_tree, render_fallback_tree

__all__ = [
    "OUTPUT_FORMATS",
    "Report",
    "build_report",
    "report_filename",
    "write_report",
    "format_list_lines",
    "format_tree_lines",
    "render_external_tree",
    "render_fallback_tree",
]
