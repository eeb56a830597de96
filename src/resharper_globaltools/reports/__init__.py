"""Report readers and summaries."""

from resharper_globaltools.reports.inspection import (
    VIOLATION_SUMMARY_PREFIX,
    format_violation_summary,
    parse_report,
)

__all__ = [
    "VIOLATION_SUMMARY_PREFIX",
    "format_violation_summary",
    "parse_report",
]
