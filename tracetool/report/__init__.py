# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace reporting: summary line, histogram chart and process list renderings.
"""

from .formatters import (
    build_histogram,
    format_histogram,
    format_process_lines,
    format_process_table,
    format_summary,
    format_trace_report,
    OUTPUT_FORMATS,
    process_to_dict,
    trace_report_to_dict,
)

__all__ = [
    "build_histogram",
    "format_histogram",
    "format_process_lines",
    "format_process_table",
    "format_summary",
    "format_trace_report",
    "OUTPUT_FORMATS",
    "process_to_dict",
    "trace_report_to_dict",
]
