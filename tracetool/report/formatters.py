# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace report formatting for different output formats.

Provides functions to render a trace summary and its process list as
plain text, an aligned table, or JSON. All functions are pure (no side
effects) and return strings or plain data.
"""

import json
from typing import Any, Optional

from tabulate import tabulate
from tracetool.trace import Histogram, InvalidRangeError, ProcessInfo, Trace
from tracetool.trace.model import LABEL_DISPLAY_WIDTH

OUTPUT_FORMATS = ["text", "table", "json"]

NO_HISTOGRAM_MESSAGE = "(not enough distinct timestamps)"


def format_summary(
    trace: Trace, processes: Optional[list[ProcessInfo]] = None
) -> str:
    """
    Format the one-line trace summary.

    Example:
        "captured=2019-08-14 10:22:31, version=Chrome/76 with 4 processes
        and 2.50s duration."
    """
    if processes is None:
        processes = trace.processes()
    timing = trace.timing()
    return (
        f"{trace.info()} with {len(processes)} processes and "
        f"{timing.duration_seconds:.2f}s duration."
    )


def build_histogram(trace: Trace) -> Optional[Histogram]:
    """Timing histogram of the trace, or None when its time range is empty."""
    try:
        return trace.timing_histogram()
    except InvalidRangeError:
        return None


def format_histogram(histogram: Optional[Histogram]) -> str:
    if histogram is None:
        return f"timing histogram: {NO_HISTOGRAM_MESSAGE}"
    return "timing histogram:\n" + histogram.render()


def format_process_lines(processes: list[ProcessInfo]) -> str:
    """One "index ▶ process" line per process."""
    if not processes:
        return "No processes found."
    return "\n".join(f"{i:>2} ▶ {process}" for i, process in enumerate(processes))


def format_process_table(
    processes: list[ProcessInfo], show_header: bool = True
) -> str:
    """Format processes as an aligned plain text table."""
    if not processes:
        return "No processes found."

    table_data = [
        [
            i,
            process.id,
            process.name,
            process.thread_count,
            process.label[:LABEL_DISPLAY_WIDTH],
        ]
        for i, process in enumerate(processes)
    ]
    headers = ["#", "PID", "NAME", "THREADS", "LABEL"] if show_header else []
    return tabulate(table_data, headers=headers, tablefmt="plain")


def process_to_dict(process: ProcessInfo) -> dict[str, Any]:
    return {
        "id": process.id,
        "name": process.name,
        "label": process.label,
        "threads": list(process.threads),
        "renderer": process.is_renderer(),
    }


def trace_report_to_dict(trace: Trace) -> dict[str, Any]:
    """
    Convert a trace summary to a dictionary for JSON output.

    Args:
        trace: Trace to summarize

    Returns:
        Dictionary with info, counts, timing, histogram bucket counts
        (None when the time range is empty) and processes
    """
    processes = trace.processes()
    timing = trace.timing()
    histogram = build_histogram(trace)
    return {
        "info": trace.info(),
        "event_count": len(trace.events),
        "process_count": len(processes),
        "timing": {
            "min": timing.min,
            "max": timing.max,
            "duration": timing.duration,
        },
        "histogram": histogram.counts if histogram is not None else None,
        "processes": [process_to_dict(p) for p in processes],
    }


def format_trace_report(trace: Trace, output_format: str = "text") -> str:
    """
    Format the full trace report: summary, histogram and process list.

    Args:
        trace: Trace to report on
        output_format: One of OUTPUT_FORMATS

    Returns:
        Formatted report string
    """
    if output_format == "json":
        return json.dumps(trace_report_to_dict(trace), indent=2)

    processes = trace.processes()
    if output_format == "table":
        process_list = format_process_table(processes)
    else:
        process_list = format_process_lines(processes)

    return "\n".join(
        [
            format_summary(trace, processes),
            format_histogram(build_histogram(trace)),
            process_list,
        ]
    )
