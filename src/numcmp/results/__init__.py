"""Results layer: plain-text report rendering."""

from numcmp.results.reporter import format_comparison, format_summary, render_report

__all__ = ["format_summary", "format_comparison", "render_report"]
